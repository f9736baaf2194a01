"""Toast message component.

Messages are language agnostic: ``key`` names a template under the
``toast`` section of a translation bundle and ``params`` carries only the
numeric values interpolated into it.
"""

from dataclasses import dataclass

from pyrsistent import pmap
from pyrsistent.typing import PMap

from couple_ludo.types import MessageKind


@dataclass(frozen=True)
class Message:
    key: str
    params: PMap[str, int] = pmap()
    kind: MessageKind = MessageKind.SUCCESS
    seq: int = 0
