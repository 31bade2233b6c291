"""Signage player: keeps one screen's weekly agenda fresh.

Every refresh samples the clock, reads a complete snapshot, and re-projects
it for the screen. The render callback fires only when the rendered frame
actually changed; each change bumps the fade key the display uses to
animate the swap.

Lifecycle: start()/stop() run a background daemon thread.
           refresh_once() can be called manually for testing.
"""

from __future__ import annotations

import json
import threading
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from ..infra.exceptions import NotFoundError
from ..infra.logging import get_logger
from ..scheduling.contracts import ScheduleConfig
from ..usecases.screen_agenda import render_snapshot_agenda
from ..usecases.snapshot import Snapshot
from .clock import Clock

logger = get_logger(__name__)

SnapshotSource = Callable[[], Snapshot]


@dataclass(frozen=True)
class PlayerFrame:
    """What the screen shows after a refresh."""

    slug: str
    fade_key: int
    found: bool
    agenda: dict[str, Any] | None


class SignagePlayer:
    """Polling refresh loop for one screen."""

    def __init__(
        self,
        slug: str,
        *,
        snapshot_source: SnapshotSource,
        clock: Clock,
        config: ScheduleConfig,
        on_render: Callable[[PlayerFrame], None],
        refresh_interval_seconds: float = 10.0,
    ) -> None:
        if refresh_interval_seconds <= 0:
            raise ValueError("refresh_interval_seconds must be greater than zero")
        self._slug = slug
        self._source = snapshot_source
        self._clock = clock
        self._config = config
        self._on_render = on_render
        self._interval_s = refresh_interval_seconds

        self._fade_key = 0
        self._last_fingerprint: str | None = None
        self._last_frame: PlayerFrame | None = None
        self._source_errors = 0

        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def last_frame(self) -> PlayerFrame | None:
        return self._last_frame

    @property
    def source_errors(self) -> int:
        return self._source_errors

    def refresh_once(self) -> PlayerFrame | None:
        """Re-project the screen and render if anything changed.

        Returns the current frame, or None when no snapshot was ever read.
        A failing snapshot source keeps the last frame on screen. Exceptions
        from ``on_render`` propagate and the same frame is offered again on
        the next refresh.
        """
        with self._lock:
            now = self._clock.now_utc()
            try:
                snapshot = self._source()
            except Exception:
                self._source_errors += 1
                logger.exception("snapshot_failed", slug=self._slug, errors=self._source_errors)
                return self._last_frame

            try:
                agenda = render_snapshot_agenda(snapshot, slug=self._slug, now=now, config=self._config)
            except NotFoundError:
                agenda = None

            fingerprint = json.dumps(agenda, sort_keys=True, default=str)
            if fingerprint == self._last_fingerprint:
                return self._last_frame

            frame = PlayerFrame(
                slug=self._slug, fade_key=self._fade_key + 1, found=agenda is not None, agenda=agenda
            )

        if agenda is None:
            logger.warning("screen_not_found", slug=self._slug)
        else:
            logger.info(
                "agenda_rendered",
                slug=self._slug,
                fade_key=frame.fade_key,
                events=sum(len(c["events"]) for c in agenda["columns"]),
                diagnostics=len(agenda["diagnostics"]),
            )
        self._on_render(frame)

        # Committed only after on_render returns.
        with self._lock:
            self._fade_key = frame.fade_key
            self._last_fingerprint = fingerprint
            self._last_frame = frame
        return frame

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self) -> None:
        if self._thread is not None:
            return
        self._stop_event.clear()
        self._thread = threading.Thread(
            target=self._run_loop,
            name=f"SignagePlayer-{self._slug}",
            daemon=True,
        )
        self._thread.start()
        logger.info("player_started", slug=self._slug, interval_s=self._interval_s)

    def stop(self) -> None:
        self._stop_event.set()
        if self._thread is not None:
            self._thread.join(timeout=self._interval_s + 5)
            self._thread = None
        logger.info("player_stopped", slug=self._slug)

    def wait(self, timeout: float | None = None) -> bool:
        """Block until stopped or ``timeout`` elapses; True when stopped."""
        return self._stop_event.wait(timeout)

    def _run_loop(self) -> None:
        while not self._stop_event.is_set():
            try:
                self.refresh_once()
            except Exception:
                logger.exception("refresh_failed", slug=self._slug)
            self._stop_event.wait(self._interval_s)
