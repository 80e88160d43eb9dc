"""Watch mode: re-run a callback when one file changes"""

import logging
import threading
from collections.abc import Callable, Iterable, Iterator
from pathlib import Path
from typing import Any

import watchfiles
from watchfiles import Change

from md2html.errors import WatchError


logger = logging.getLogger(__name__)

DEFAULT_DEBOUNCE_MS = 100
RETRY_DELAY_S = 1.0

ChangeBatch = set[tuple[Any, str]]
# Yields non-empty batches as changes arrive and an empty batch once the
# source has been quiet for debounce_ms.
ChangesFactory = Callable[[Path, threading.Event, int], Iterable[ChangeBatch]]


def target_filter(target: Path) -> Callable[[Change, str], bool]:
    """Accept adds and modifications of target only (atomic saves show up as adds)."""
    def _filter(change: Change, path: str) -> bool:
        return change != Change.deleted and Path(path).resolve() == target
    return _filter


def make_watchfiles_iter(target: Path, stop_event: threading.Event, debounce_ms: int) -> Iterator[ChangeBatch]:
    """Watch target's directory with watchfiles.

    watchfiles groups repeated writes to one file into a single change, so it
    cannot tell a burst from a pause; the quiet period is its timeout instead,
    which yields an empty batch after debounce_ms without any change.
    """
    return watchfiles.watch(
        target.parent,
        watch_filter=target_filter(target),
        debounce=debounce_ms,
        rust_timeout=debounce_ms,
        yield_on_timeout=True,
        stop_event=stop_event,
        recursive=False,
    )


def _log_error(error: WatchError) -> None:
    logger.error("%s", error)


class FileWatcher:
    """Calls on_change(path) once per debounced burst of changes to path.

    A single worker thread owns the subscription and runs the callback, so
    calls never overlap. After stop() returns no further callback starts.
    """

    def __init__(
        self,
        path: Path,
        on_change: Callable[[Path], None],
        debounce_ms: int = DEFAULT_DEBOUNCE_MS,
        on_error: Callable[[WatchError], None] = _log_error,
        changes: ChangesFactory = make_watchfiles_iter,
        retry_delay: float = RETRY_DELAY_S,
        ):
        self.path = Path(path).resolve()
        self.on_change = on_change
        self.on_error = on_error
        self.debounce_ms = debounce_ms
        self.retry_delay = retry_delay
        self._changes = changes
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    @property
    def stopped(self) -> bool:
        return self._stop.is_set()

    def start(self) -> "FileWatcher":
        if self._thread is not None:
            raise RuntimeError(f"Watcher for {self.path} already started")
        self._thread = threading.Thread(target=self._run, name=f"md2html-watch-{self.path.name}", daemon=True)
        self._thread.start()
        logger.info("Watching %s for changes...", self.path)
        return self

    def stop(self, timeout: float = None) -> None:
        """Release the subscription and wait for the worker to exit."""
        self._stop.set()
        if self._thread is None:
            return
        if self._thread is not threading.current_thread():
            self._thread.join(timeout)
        logger.info("Stopped watching %s.", self.path)

    def __enter__(self) -> "FileWatcher":
        return self.start()

    def __exit__(self, *exc_info) -> None:
        self.stop()

    def _run(self) -> None:
        while not self._stop.is_set():
            pending = False
            try:
                for batch in self._changes(self.path, self._stop, self.debounce_ms):
                    if self._stop.is_set():
                        return
                    if batch:
                        pending = True
                    elif pending:
                        pending = False
                        self._dispatch()
                return
            except Exception as e:
                error = WatchError(f"Watcher error on {self.path}: {e}")
                error.__cause__ = e
                self.on_error(error)
                self._stop.wait(self.retry_delay)

    def _dispatch(self) -> None:
        logger.info("Change detected: %s", self.path)
        try:
            self.on_change(self.path)
        except Exception:
            logger.exception("Change handler failed for %s", self.path)


def watch(
    path: Path,
    on_change: Callable[[Path], None],
    debounce_ms: int = DEFAULT_DEBOUNCE_MS,
    on_error: Callable[[WatchError], None] = _log_error,
    ) -> FileWatcher:
    """Start and return a FileWatcher; call .stop() on it to end the session."""
    return FileWatcher(path, on_change, debounce_ms=debounce_ms, on_error=on_error).start()
