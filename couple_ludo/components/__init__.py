"""couple_ludo.components
=======================

Aggregate import surface for the immutable value objects stored on
:class:`couple_ludo.state.State`::

    from couple_ludo.components import Cell, CurrentTask, Animation

They carry no behavior beyond a few derived properties; the systems package
transforms them.
"""

from .animation import Animation
from .cell import Cell
from .landing import Landing
from .message import Message
from .task import CurrentTask

__all__ = [
    "Animation",
    "Cell",
    "CurrentTask",
    "Landing",
    "Message",
]
