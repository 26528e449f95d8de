from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from pathlib import Path
from types import TracebackType
from typing import Optional, Tuple

from adventure_core.common.config import get_config_paths, get_max_suggestion_count
from adventure_core.common.text import StringCaretPair, sterilize_input
from adventure_core.world.world import World
from adventure_core.world.world_loader import load_world

from .catalog import VocabularyCatalog
from .context import PromptContext, create_context_from_sterile
from .errors import ContextError, FatalContextError
from .strategies import Suggestion

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class SuggestionResult:
    """Outcome of one keystroke: a context, or the reason there is none."""

    text: str
    caret: int
    context: Optional[PromptContext] = None
    error: Optional[str] = None
    fatal: bool = False

    @property
    def suggestions(self) -> Tuple[Suggestion, ...]:
        return self.context.suggestions if self.context else ()

    @property
    def ok(self) -> bool:
        return self.context is not None


@dataclass
class _PendingInput:
    text: str = ""
    caret: int = 0
    needs_refresh: bool = False


class SuggestionService:
    """Run disambiguation passes for one prompt session.

    Passes run one at a time. Recoverable failures just mean "no suggestions
    for this keystroke"; a fatal failure is logged and switches suggestions
    off for the rest of the session.
    """

    def __init__(
        self,
        *,
        world: World,
        max_suggestions: Optional[int] = None,
    ) -> None:
        self.world = world
        self.max_suggestions = (
            max_suggestions if max_suggestions is not None else get_max_suggestion_count()
        )
        self.enabled = True
        self._lock = threading.Lock()
        self._pending = _PendingInput()
        self._last_result: Optional[SuggestionResult] = None

    @classmethod
    def from_config(
        cls,
        *,
        world_path: Optional[Path] = None,
        max_suggestions: Optional[int] = None,
    ) -> "SuggestionService":
        path = world_path or get_config_paths()["default_world"]
        return cls(world=load_world(path), max_suggestions=max_suggestions)

    def close(self) -> None:
        with self._lock:
            self._pending = _PendingInput()
            self._last_result = None

    def __enter__(self) -> "SuggestionService":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def catalog(self) -> VocabularyCatalog:
        return VocabularyCatalog.from_world(self.world)

    def suggest(self, text: str, caret: Optional[int] = None) -> SuggestionResult:
        sterile = sterilize_input(text, len(text) if caret is None else caret)
        with self._lock:
            result = self._run_pass(sterile)
            self._last_result = result
        return result

    def request(self, text: str, caret: Optional[int] = None) -> None:
        """Record the latest input; only the newest request is ever computed."""

        with self._lock:
            self._pending = _PendingInput(
                text=text,
                caret=len(text) if caret is None else caret,
                needs_refresh=True,
            )

    @property
    def needs_refresh(self) -> bool:
        with self._lock:
            return self._pending.needs_refresh

    def refresh(self) -> Optional[SuggestionResult]:
        """Compute suggestions for the pending request, if there is one."""

        with self._lock:
            if not self._pending.needs_refresh:
                return None
            pending = self._pending
            self._pending = _PendingInput(text=pending.text, caret=pending.caret)
            sterile = sterilize_input(pending.text, pending.caret)
            result = self._run_pass(sterile)
            self._last_result = result
        return result

    @property
    def last_result(self) -> Optional[SuggestionResult]:
        with self._lock:
            return self._last_result

    def _run_pass(self, sterile: StringCaretPair) -> SuggestionResult:
        if not self.enabled:
            return SuggestionResult(
                text=sterile.text,
                caret=sterile.caret,
                error="Suggestions are disabled for this session.",
                fatal=True,
            )

        try:
            context = create_context_from_sterile(
                sterile,
                self.catalog(),
                max_suggestions=self.max_suggestions,
            )
        except ContextError as exc:
            # Normal while typing; the player has not finished a phrase yet.
            LOGGER.debug("No suggestions for %r: %s", sterile.text, exc)
            return SuggestionResult(text=sterile.text, caret=sterile.caret, error=str(exc))
        except FatalContextError as exc:
            LOGGER.exception("Disabling suggestions after fatal context error")
            self.enabled = False
            return SuggestionResult(
                text=sterile.text, caret=sterile.caret, error=str(exc), fatal=True
            )

        return SuggestionResult(text=sterile.text, caret=sterile.caret, context=context)
