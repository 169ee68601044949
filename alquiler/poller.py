"""
Background polling of the availability sheet.

A single worker thread fetches the feed immediately on start and then after
every interval. Each fetch captures the poller's generation when it begins;
results are applied only if the generation is still current, so nothing is
written after stop().

Worker fetches never overlap each other. A manual refresh() from another
thread can race a worker fetch; whichever lands last wins.
"""

import logging
import threading
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, Optional

from . import config
from .feed import fetch_sheet, parse_csv

logger = logging.getLogger(__name__)

FetchFunc = Callable[[str], tuple[Optional[str], Optional[str]]]
ParseFunc = Callable[[str], list[dict[str, str]]]


@dataclass(frozen=True)
class FeedSnapshot:
    """What consumers see: last good records plus fetch status."""

    records: list = field(default_factory=list)
    loading: bool = False
    error: Optional[str] = None
    fetched_at: Optional[datetime] = None
    generation: int = 0


class SheetPoller:
    """Periodically re-fetch and re-parse a CSV feed."""

    def __init__(self, url: str, refresh_seconds: int = config.REFRESH_SECONDS,
                 fetch: FetchFunc = fetch_sheet, parse: ParseFunc = parse_csv):
        self.url = url
        self.interval = max(config.MIN_REFRESH_SECONDS, refresh_seconds)
        self._fetch = fetch
        self._parse = parse

        self._lock = threading.Lock()
        self._generation = 0
        self._active = False
        self._records: list[dict[str, str]] = []
        self._loading = False
        self._error: Optional[str] = None
        self._fetched_at: Optional[datetime] = None

        self._wake = threading.Event()
        self._thread: Optional[threading.Thread] = None

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    @property
    def active(self) -> bool:
        with self._lock:
            return self._active

    def activate(self) -> int:
        """Open a new generation without starting the worker thread."""
        with self._lock:
            if not self._active:
                self._generation += 1
                self._active = True
            return self._generation

    def start(self) -> None:
        """Fetch now and then every interval on a daemon thread."""
        with self._lock:
            if self._active and self._thread is not None:
                return
        generation = self.activate()
        self._wake.clear()
        self._thread = threading.Thread(
            target=self._run, args=(generation,), name="sheet-poller", daemon=True
        )
        self._thread.start()
        logger.info("Polling %s every %ds", self.url, self.interval)

    def stop(self) -> None:
        """Cancel polling; in-flight results are dropped."""
        with self._lock:
            self._generation += 1
            self._active = False
            self._loading = False
        self._wake.set()
        self._thread = None
        logger.info("Stopped polling %s", self.url)

    def refresh_now(self) -> None:
        """Wake the worker so it fetches before the interval elapses."""
        self._wake.set()

    def _run(self, generation: int) -> None:
        while self._is_current(generation):
            self._refresh(generation)
            self._wake.wait(self.interval)
            self._wake.clear()

    def _is_current(self, generation: int) -> bool:
        with self._lock:
            return self._active and self._generation == generation

    # -------------------------------------------------------------------------
    # Fetching
    # -------------------------------------------------------------------------

    def refresh(self) -> None:
        """Run one fetch cycle in the calling thread."""
        with self._lock:
            if not self._active:
                return
            generation = self._generation
        self._refresh(generation)

    def _refresh(self, generation: int) -> None:
        with self._lock:
            if not self._active or generation != self._generation:
                return
            self._loading = True
            self._error = None

        records = []
        error = None
        try:
            text, error = self._fetch(self.url)
            if error is None:
                records = self._parse(text or "")
        except ValueError as e:
            error = f"Failed to parse feed: {e}"
        except Exception as e:
            logger.exception("Unexpected error refreshing %s", self.url)
            error = f"Failed to load feed: {e}"

        with self._lock:
            if generation != self._generation:
                logger.debug("Discarding result of superseded fetch (generation %d)", generation)
                return
            try:
                if error is not None:
                    self._error = error
                    logger.warning("Feed fetch failed, keeping previous data: %s", error)
                else:
                    self._records = records
                    self._fetched_at = datetime.now(timezone.utc)
                    logger.debug("Loaded %d feed rows", len(records))
            finally:
                self._loading = False

    # -------------------------------------------------------------------------
    # Observation
    # -------------------------------------------------------------------------

    def snapshot(self) -> FeedSnapshot:
        with self._lock:
            return FeedSnapshot(
                records=list(self._records),
                loading=self._loading,
                error=self._error,
                fetched_at=self._fetched_at,
                generation=self._generation,
            )
