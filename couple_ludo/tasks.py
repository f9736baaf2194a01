"""Task content supply.

Task sets are JSON arrays of strings, one file per mode and language:
``{mode}.json`` holds the default-language set and ``{mode}-{lang}.json``
the localized ones. :func:`load_tasks` walks the fallback chain

    requested language -> default language -> built-in placeholders

so a game never starts with an empty queue.
"""

import json
import logging
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path
from typing import Dict, List, Optional, Protocol, Sequence, Union

from pyrsistent import pvector
from pyrsistent.typing import PVector

from couple_ludo.types import GameMode, Language

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = Language.ZH

BUILTIN_TASKS: Dict[Language, List[str]] = {
    Language.ZH: ["做一个鬼脸", "给对方一个赞美", "分享一个小秘密"],
    Language.EN: [
        "Make a funny face",
        "Give your partner a compliment",
        "Share a little secret",
    ],
}


class TaskLoadError(LookupError):
    """Raised by a provider when a task set cannot be produced."""


class TaskProvider(Protocol):
    def fetch(self, mode: GameMode, language: Language) -> Sequence[str]: ...


class FileTaskProvider:
    """Reads task sets from a directory (package data by default).

    Attributes:
        root: Directory containing the ``{mode}[-{lang}].json`` files.
    """

    def __init__(self, root: Optional[Union[Path, Traversable]] = None) -> None:
        self.root = root if root is not None else resources.files("couple_ludo") / "data" / "tasks"

    @staticmethod
    def filename(mode: GameMode, language: Language) -> str:
        if language == DEFAULT_LANGUAGE:
            return f"{mode}.json"
        return f"{mode}-{language}.json"

    def fetch(self, mode: GameMode, language: Language) -> Sequence[str]:
        name = self.filename(mode, language)
        try:
            with (self.root / name).open(encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise TaskLoadError(f"Failed to load tasks from {name}: {e}") from e
        if not isinstance(data, list) or not all(isinstance(t, str) for t in data):
            raise TaskLoadError(f"{name} is not a list of strings")
        if not data:
            raise TaskLoadError(f"{name} is empty")
        return data


def load_tasks(
    provider: TaskProvider,
    mode: GameMode,
    language: Language,
    default_language: Language = DEFAULT_LANGUAGE,
) -> PVector[str]:
    """Fetch the task set for ``mode`` with the language fallback chain.

    Args:
        default_language (Language): Language tried when ``language`` has no set.

    Returns:
        PVector[str]: Unshuffled task descriptions, never empty.
    """
    try:
        return pvector(provider.fetch(mode, language))
    except TaskLoadError as e:
        logger.warning("No %s tasks for mode %s: %s", language, mode, e)

    if language != default_language:
        try:
            return pvector(provider.fetch(mode, default_language))
        except TaskLoadError as e:
            logger.warning("No %s tasks for mode %s: %s", default_language, mode, e)

    logger.error("Error loading tasks for mode %s, using built-in placeholders", mode)
    return pvector(BUILTIN_TASKS.get(language, BUILTIN_TASKS[DEFAULT_LANGUAGE]))
