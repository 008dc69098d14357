"""Editor-facing highlight session with debounced rescans.

A HighlightSession ties a buffer source to a DecorationSink. Every edit,
buffer switch or explicit refresh calls ``trigger()``; the session keeps at
most one rescan pending and each new trigger replaces it, so a burst of
edits costs one scan of the latest snapshot.

Usage:
    session = HighlightSession(read_active_buffer, renderer)
    session.activate()
    ...
    session.trigger()      # on every change notification
    session.refresh()      # user command
    ...
    session.deactivate()

Thread Safety:
    The pending timer fires on its own thread. Each scan records the
    session generation when it starts and applies its result only if no
    trigger or deactivate() has moved the generation on; the check and the
    sink calls happen under one lock.

"""

from __future__ import annotations

import threading
from collections.abc import Callable
from functools import partial
from dataclasses import dataclass
from typing import Protocol

from rainbowtags.classify import classify_content
from rainbowtags.config import HighlightConfig, get_config
from rainbowtags.decorations import DecorationSet, DecorationSink
from rainbowtags.scanner import scan
from rainbowtags.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class BufferSnapshot:
    """The text and identity of the active buffer at one moment."""

    text: str
    language_id: str | None = None
    file_name: str | None = None


class TimerHandle(Protocol):
    def start(self) -> None: ...

    def cancel(self) -> None: ...


TimerFactory = Callable[[float, Callable[[], None]], TimerHandle]


class HighlightSession:
    """Activation-scoped highlighting state for one editor.

    Attributes are private; use ``pending`` and ``decorations`` to inspect.

    """

    def __init__(
        self,
        source: Callable[[], BufferSnapshot | None],
        sink: DecorationSink,
        *,
        config: HighlightConfig | None = None,
        timer_factory: TimerFactory = threading.Timer,
    ) -> None:
        """Initialize an inactive session.

        Args:
            source: Returns the active buffer, or None when there is none
            sink: Renderer receiving decorations
            config: Highlight config (defaults to the active context config)
            timer_factory: Builds the debounce timer; ``threading.Timer`` by default
        """
        self._source = source
        self._sink = sink
        self._config = config or get_config()
        self._timer_factory = timer_factory
        self._timer: TimerHandle | None = None
        self._generation = 0
        self._lock = threading.RLock()
        self._active = False
        self._decorations = DecorationSet(self._config.palette_size)

    @property
    def active(self) -> bool:
        return self._active

    @property
    def pending(self) -> bool:
        """A rescan is scheduled and has not run yet."""
        return self._timer is not None

    @property
    def decorations(self) -> DecorationSet:
        """Decorations from the most recent scan."""
        return self._decorations

    def activate(self) -> None:
        """Start the session and schedule a first scan."""
        self._active = True
        logger.debug("Session activated")
        self.trigger()

    def deactivate(self) -> None:
        """Cancel any pending scan and remove all decorations."""
        self._active = False
        self._cancel_pending()
        self._clear()
        logger.debug("Session deactivated")

    def trigger(self) -> None:
        """Schedule a rescan, replacing any rescan already pending."""
        if not self._active:
            return
        with self._lock:
            self._generation += 1
            timer = self._timer_factory(
                self._config.debounce_seconds, partial(self._run_scheduled, self._generation)
            )
            previous, self._timer = self._timer, timer
        if previous is not None:
            previous.cancel()
            logger.debug("Superseded pending rescan")
        logger.debug("Rescan scheduled in %.3fs", self._config.debounce_seconds)
        timer.start()

    def refresh(self) -> None:
        """Recompute decorations for the active buffer."""
        self.trigger()

    def update_now(self) -> None:
        """Rescan the current snapshot synchronously and apply the result."""
        with self._lock:
            generation = self._generation
        self._update(generation)

    def _update(self, generation: int) -> None:
        snapshot = self._source()
        kind = None
        if snapshot is not None:
            kind = classify_content(snapshot.language_id, snapshot.file_name)

        decorations = DecorationSet(self._config.palette_size)
        if snapshot is not None and kind is not None:
            spans = scan(snapshot.text, kind, config=self._config)
            decorations.extend(spans)

        with self._lock:
            if generation != self._generation:
                logger.debug("Discarded superseded rescan")
                return
            self._decorations = decorations
            if kind is None:
                self._sink.clear()
            else:
                self._apply()

    def _run_scheduled(self, generation: int) -> None:
        with self._lock:
            # A cancelled timer may still fire once it has started
            if generation != self._generation or not self._active:
                return
            self._timer = None
        self._update(generation)

    def _cancel_pending(self) -> None:
        with self._lock:
            self._generation += 1
            timer, self._timer = self._timer, None
        if timer is not None:
            timer.cancel()
            logger.debug("Cancelled pending rescan")

    def _apply(self) -> None:
        config = self._config
        for channel, index, spans in self._decorations:
            self._sink.apply(
                channel,
                index,
                spans,
                color=config.palette[index],
                intensity=config.intensity_for(channel),
            )

    def _clear(self) -> None:
        with self._lock:
            self._decorations = DecorationSet(self._config.palette_size)
            self._sink.clear()
