"""Message lookup for notification subjects, labels and bodies."""

import logging
from typing import Any, Optional, Protocol

from taskhooks.errors import MissingTranslation
from taskhooks.lang import CATALOGS

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en"


class Translator(Protocol):
    def resolve(self, key: str, **params: Any) -> str:
        ...


class CatalogTranslator:
    """
    Resolve dotted keys (``hooks.project``) against a nested message catalog.

    Messages use ``str.format`` named placeholders, e.g. ``{reason}``. A key
    with no text, or a message whose placeholders were not all supplied,
    raises MissingTranslation.
    """

    def __init__(self, messages: dict, locale: str = DEFAULT_LOCALE):
        self._messages = messages
        self.locale = locale

    def resolve(self, key: str, **params: Any) -> str:
        node: Any = self._messages
        for part in key.split("."):
            if not isinstance(node, dict) or part not in node:
                raise MissingTranslation(key, self.locale)
            node = node[part]

        if not isinstance(node, str):
            raise MissingTranslation(key, self.locale, "key is a group, not a message")

        try:
            return node.format(**params)
        except (KeyError, IndexError, ValueError) as e:
            raise MissingTranslation(key, self.locale, f"cannot format message: {e!r}") from e


def get_translator(locale: Optional[str] = None) -> CatalogTranslator:
    locale = locale or DEFAULT_LOCALE
    messages = CATALOGS.get(locale)
    if messages is None:
        logger.warning("No catalog for locale %s, falling back to %s", locale, DEFAULT_LOCALE)
        locale = DEFAULT_LOCALE
        messages = CATALOGS[DEFAULT_LOCALE]
    return CatalogTranslator(messages, locale)
