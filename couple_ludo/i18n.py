"""Localization bundles.

Bundles are nested JSON objects shipped as package data under
``data/locales/{language}.json`` and frozen into persistent maps. Game logic
never reads them: it emits language agnostic message keys and numeric
parameters which are rendered here with :func:`translate`.
"""

import json
import logging
import re
from functools import lru_cache
from importlib import resources
from typing import Any, Mapping, Optional

from pyrsistent import freeze, pmap
from pyrsistent.typing import PMap

from couple_ludo.components import Message
from couple_ludo.types import Language

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = Language.ZH

Translations = PMap[str, Any]

_PLACEHOLDER = re.compile(r"\{(\w+)\}")


def _read_bundle(language: Language) -> Translations:
    path = resources.files("couple_ludo") / "data" / "locales" / f"{language}.json"
    with path.open(encoding="utf-8") as f:
        return freeze(json.load(f))


@lru_cache(maxsize=None)
def load_translations(
    language: Language, default_language: Language = DEFAULT_LANGUAGE
) -> Translations:
    """Load the bundle for ``language``, falling back to ``default_language``.

    Raises:
        FileNotFoundError: If even the default bundle is missing.
    """
    try:
        return _read_bundle(language)
    except (OSError, ValueError) as e:
        if language == default_language:
            raise
        logger.warning(
            "Translations for %s unavailable (%s), using %s", language, e, default_language
        )
        return _read_bundle(default_language)


def interpolate(template: str, params: Mapping[str, Any]) -> str:
    """Replace ``{name}`` placeholders; unknown names are left as is."""

    def substitute(match: "re.Match[str]") -> str:
        name = match.group(1)
        return str(params[name]) if name in params else match.group(0)

    return _PLACEHOLDER.sub(substitute, template)


def lookup(bundle: Translations, key: str) -> Optional[str]:
    """Resolve a dotted key such as ``"toast.redStay"``."""
    node: Any = bundle
    for part in key.split("."):
        if not isinstance(node, Mapping) or part not in node:
            return None
        node = node[part]
    return node if isinstance(node, str) else None


def translate(bundle: Translations, key: str, params: Mapping[str, Any] = pmap()) -> str:
    """Render ``key`` from ``bundle``; a missing key renders as itself."""
    template = lookup(bundle, key)
    if template is None:
        logger.debug("Missing translation key %s", key)
        return key
    return interpolate(template, params)


def translate_message(bundle: Translations, message: Message) -> str:
    """Render an outcome toast from the ``toast`` section."""
    return translate(bundle, f"toast.{message.key}", message.params)
