"""Completion notifications for deployment runs."""
