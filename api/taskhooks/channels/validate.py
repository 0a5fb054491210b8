"""Config validation for hooks."""

from typing import Optional
from urllib.parse import urlparse

VALID_HOOK_TYPES = {"mail", "slack", "dingtalk", "webhook"}

# Common typos -> correct type
_HOOK_SUGGESTIONS: dict[str, str] = {
    "email": "mail",
    "e-mail": "mail",
    "mial": "mail",
    "slak": "slack",
    "sclack": "slack",
    "ding": "dingtalk",
    "ding-talk": "dingtalk",
    "dingding": "dingtalk",
    "webhok": "webhook",
    "hook": "webhook",
    "custom": "webhook",
}


def suggest_hook_type(input_type: str) -> Optional[str]:
    """Return a suggestion if the input looks like a typo of a valid type."""
    if input_type in VALID_HOOK_TYPES:
        return None
    return _HOOK_SUGGESTIONS.get(input_type.lower())


def validate_hook_config(hook_type: str, config: dict) -> Optional[str]:
    """
    Validate hook config for a given type.
    Returns None if valid, or an error message string if invalid.
    """
    validators = {
        "mail": _validate_mail,
        "slack": _validate_slack,
        "dingtalk": _validate_dingtalk,
        "webhook": _validate_webhook,
    }
    validator = validators.get(hook_type)
    if not validator:
        suggestion = suggest_hook_type(hook_type)
        hint = f" Did you mean '{suggestion}'?" if suggestion else ""
        return f"Unknown hook type: {hook_type}.{hint}"
    if not isinstance(config, dict):
        return "Hook config must be an object"
    return validator(config)


# --- Internal validators ---


def _validate_url(value, field_name: str) -> Optional[str]:
    if not isinstance(value, str) or not value:
        return f"Missing required field: {field_name}"
    try:
        parsed = urlparse(value)
        if parsed.scheme not in ("http", "https"):
            return f"{field_name} must use http or https protocol"
        if not parsed.netloc:
            return f"{field_name} is not a valid URL"
    except ValueError:
        return f"{field_name} is not a valid URL"
    return None


def _validate_mail(config: dict) -> Optional[str]:
    email = config.get("email")
    if not isinstance(email, str) or not email:
        return "Missing required field: email"
    if "@" not in email:
        return f"Invalid email address: {email}"
    return None


def _validate_slack(config: dict) -> Optional[str]:
    err = _validate_url(config.get("url"), "url")
    if err:
        return err
    if not config.get("channel"):
        return "Missing required field: channel"
    return None


def _validate_dingtalk(config: dict) -> Optional[str]:
    err = _validate_url(config.get("url"), "url")
    if err:
        return err
    at_mobiles = config.get("at_mobiles")
    if at_mobiles is not None and not isinstance(at_mobiles, str):
        return "at_mobiles must be a comma-separated string"
    return None


def _validate_webhook(config: dict) -> Optional[str]:
    err = _validate_url(config.get("url"), "url")
    if err:
        return err
    custom_headers = config.get("custom_headers")
    if custom_headers is not None and not isinstance(custom_headers, dict):
        return "custom_headers must be an object"
    return None
