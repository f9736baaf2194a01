"""Game session driver.

:class:`Game` couples the pure reducer with its collaborators: it generates
boards, loads task sets and translations, feeds actions through
:func:`couple_ludo.step.step` and turns the returned effects into timers on
a :class:`~couple_ludo.scheduler.TickScheduler`.

Usage:

``game = Game(seed=7); game.start_game(GameMode.NORMAL); game.roll(); game.run_until_idle()``

Front-ends call the control methods and redraw from :attr:`Game.state`;
tests advance the virtual clock instead of waiting.
"""

import logging
import random
from typing import Callable, List, Optional

from pyrsistent import pvector
from pyrsistent.typing import PVector

from couple_ludo.actions import (
    Action,
    AnimationTick,
    ChangeLanguage,
    ReportTaskOutcome,
    Restart,
    RollDice,
    StartGame,
)
from couple_ludo.board import create_board
from couple_ludo.components import Message
from couple_ludo.config import DEFAULT_CONFIG, GameConfig
from couple_ludo.effects import EmitMessage, StartAnimation, StartTimer, Transition
from couple_ludo.i18n import Translations, load_translations, lookup, translate_message
from couple_ludo.scheduler import TickScheduler
from couple_ludo.state import DEFAULT_EMPTY_QUEUE_TEXT, State
from couple_ludo.step import step
from couple_ludo.tasks import FileTaskProvider, TaskProvider, load_tasks
from couple_ludo.types import BoardFn, GameMode, Language, Phase, RollFn
from couple_ludo.utils.rng import seeded_roll_fn

logger = logging.getLogger(__name__)


class Game:
    """Interactive two-player session.

    Attributes:
        state: Current immutable game state.
        scheduler: Timer queue driving animations and delayed transitions.
        translations: Bundle for the active language.
        messages: Toasts emitted since the last restart, oldest first.
    """

    def __init__(
        self,
        config: GameConfig = DEFAULT_CONFIG,
        seed: Optional[int] = None,
        language: Optional[Language] = None,
        task_provider: Optional[TaskProvider] = None,
        board_fn: Optional[BoardFn] = None,
        roll_fn: RollFn = seeded_roll_fn,
    ) -> None:
        if seed is None:
            seed = random.randrange(2**31)
        if language is None:
            language = config.default_language
        self.config = config
        self.seed = seed
        self.task_provider: TaskProvider = task_provider or FileTaskProvider()
        self._board_fn = board_fn or create_board
        self.translations: Translations = load_translations(
            language, config.default_language
        )
        self.messages: List[Message] = []
        self.scheduler: TickScheduler[Action] = TickScheduler(self.dispatch)
        self._games_started = 0
        self.state = State(
            cells=self._board_fn(config, seed),
            language=language,
            seed=seed,
            empty_queue_text=self._empty_queue_text(),
            roll_fn=roll_fn,
            config=config,
        )

    # --- controls ---------------------------------------------------------

    def start_game(self, mode: GameMode) -> None:
        """Generate a fresh board, load the task set and leave the start screen."""
        self._games_started += 1
        tasks = load_tasks(
            self.task_provider, mode, self.state.language, self.config.default_language
        )
        cells = self._board_fn(self.config, self.seed + self._games_started)
        self.dispatch(StartGame(mode=mode, cells=cells, tasks=tasks))

    def roll(self) -> None:
        self.dispatch(RollDice())

    def report_task(self, completed: bool) -> None:
        self.dispatch(ReportTaskOutcome(completed))

    def restart(self) -> None:
        """Abort the current game and return to the start screen."""
        self.scheduler.clear()
        self.messages.clear()
        self.dispatch(Restart())

    def change_language(self, language: Language) -> None:
        """Reload text and task content without resetting the game.

        Task content is only fetched for an active game; the start screen
        loads it on :meth:`start_game`.
        """
        self.translations = load_translations(language, self.config.default_language)
        tasks: PVector[str] = pvector()
        if self.state.phase != Phase.START:
            tasks = load_tasks(
                self.task_provider, self.state.mode, language, self.config.default_language
            )
        self.dispatch(
            ChangeLanguage(
                language=language,
                tasks=tasks,
                empty_queue_text=self._empty_queue_text(),
            )
        )

    # --- driving ----------------------------------------------------------

    def dispatch(self, action: Action) -> Transition:
        """Apply ``action`` and carry out the resulting effects."""
        transition = step(self.state, action)
        self.state = transition.state
        for effect in transition.effects:
            self._apply_effect(effect)
        return transition

    def advance(self, ms: int) -> int:
        return self.scheduler.advance(ms)

    def run_until_idle(self, max_events: int = 10_000) -> int:
        return self.scheduler.run_until_idle(max_events)

    def run_realtime(self, on_fire: Optional[Callable[[], None]] = None) -> int:
        return self.scheduler.run_realtime(on_fire)

    def translate_message(self, message: Message) -> str:
        return translate_message(self.translations, message)

    # --- internals --------------------------------------------------------

    def _apply_effect(self, effect: object) -> None:
        if isinstance(effect, StartAnimation):
            self.scheduler.schedule(self.config.tick_ms, AnimationTick(self.state.epoch))
        elif isinstance(effect, StartTimer):
            self.scheduler.schedule(effect.delay_ms, effect.action)
        elif isinstance(effect, EmitMessage):
            self.messages.append(effect.message)
            logger.info("%s", self.translate_message(effect.message))
        else:
            raise ValueError(f"Unknown effect: {effect!r}")

    def _empty_queue_text(self) -> str:
        return lookup(self.translations, "tasks.emptyQueue") or DEFAULT_EMPTY_QUEUE_TEXT
