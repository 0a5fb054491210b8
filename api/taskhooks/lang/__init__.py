"""Bundled message catalogs, keyed by locale."""

from taskhooks.lang import en

CATALOGS: dict[str, dict] = {
    "en": en.MESSAGES,
}
