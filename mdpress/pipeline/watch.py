#!/usr/bin/env python3
"""
watch.py
-------------------
Reconvert Markdown files in a directory whenever they change.

A watchdog Observer thread only enqueues notifications. A single consumer
reads them, drops repeats for the same file that arrive within the
debounce window, and runs each accepted conversion synchronously, so the
debounce state is never shared between threads.

A failed conversion or an observer error is logged and watching goes on;
the loop ends only when the notification source closes (or on Ctrl+C).

Usage:
    debouncer = WatchDebouncer(base_config, output_dir=Path("pdf"), logger=logger)
    watch_directory(Path("notes"), debouncer)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import os
import queue
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, Iterable, Iterator, Optional

# --- Third party ---
from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

# --- Local imports ---
from mdpress.core.cli import ConversionStats
from mdpress.core.exceptions import ConversionError, InputError
from mdpress.core.logging_manager import MdpressLogger, safe_logger
from mdpress.dataclasses.run_config import RunConfig
from mdpress.pipeline.md2pdf import convert_file
from mdpress.utils.fs import is_markdown_file


DEBOUNCE_WINDOW = 2.0
"""Seconds that must pass between two accepted changes of the same file."""

POLL_INTERVAL = 0.5
"""Seconds between checks that the observer thread is still running."""

CHANGE = "change"
ERROR = "error"

WatchCallback = Callable[[RunConfig, Optional[ConversionStats], Optional[ConversionError]], None]


@dataclass(frozen=True)
class WatchNotification:
    """
    One item from the filesystem notification source.

    Attributes:
        kind: ``"change"`` for a file write, ``"error"`` for a source error
        path: Changed file (change notifications)
        error: Reported error (error notifications)
    """
    kind: str
    path: Optional[Path] = None
    error: Optional[BaseException] = None

    @classmethod
    def change(cls, path: Path | str) -> "WatchNotification":
        return cls(CHANGE, path=Path(path))

    @classmethod
    def failure(cls, error: BaseException) -> "WatchNotification":
        return cls(ERROR, error=error)


class WatchDebouncer:
    """
    Turns change notifications into at most one conversion per window.

    Attributes:
        base_config: Template, theme and css shared read-only by every event
        output_dir: Directory for the PDFs; next to each input if None
        window: Debounce window in seconds
        last_seen: Absolute path → time of its last accepted change
        conversions: Number of conversions started
    """

    def __init__(
        self,
        base_config: RunConfig,
        output_dir: Optional[Path] = None,
        convert: Optional[Callable[[RunConfig], ConversionStats]] = None,
        on_result: Optional[WatchCallback] = None,
        window: float = DEBOUNCE_WINDOW,
        clock: Callable[[], float] = time.monotonic,
        logger: Optional[MdpressLogger] = None,
    ) -> None:
        """
        Initialize the debouncer.

        Args:
            base_config: Config copied for every accepted change
            output_dir: Directory for the PDFs
            convert: Conversion callable; defaults to ``convert_file``
            on_result: Optional callback (config, stats, error) per conversion
            window: Debounce window in seconds
            clock: Monotonic time source
            logger: Optional logger
        """
        self.base_config = base_config
        self.output_dir = output_dir
        self.convert = convert or (lambda config: convert_file(config, logger=logger))
        self.on_result = on_result
        self.window = window
        self.clock = clock
        self.logger = logger
        self.last_seen: Dict[str, float] = {}
        self.conversions = 0

    def should_convert(self, path: Path | str, now: Optional[float] = None) -> bool:
        """
        Decide whether a change of ``path`` triggers a conversion.

        Non-Markdown paths are ignored. A Markdown path is accepted when it
        has not been seen, or when at least ``window`` seconds passed since
        its last accepted change; acceptance records ``now``.

        Args:
            path: Changed file
            now: Current time (defaults to the clock)

        Returns:
            True if a conversion should run
        """
        if not is_markdown_file(path):
            return False

        key = str(Path(path).absolute())
        now = self.clock() if now is None else now

        last = self.last_seen.get(key)
        if last is not None and now - last < self.window:
            return False

        self.last_seen[key] = now
        return True

    def handle(self, path: Path | str) -> Optional[ConversionStats]:
        """
        Convert one accepted file.

        Args:
            path: Markdown file to convert

        Returns:
            ConversionStats, or None if the conversion failed
        """
        log = safe_logger(self.logger)
        config = self.base_config.for_input(Path(path), self.output_dir)
        self.conversions += 1

        log.log_info(f"Change detected: {config.input_path}")

        try:
            stats = self.convert(config)
        except ConversionError as e:
            log.log_error(
                e,
                {"operation": "watch_convert", "input": str(config.input_path)},
            )
            if self.on_result:
                self.on_result(config, None, e)
            return None

        if self.on_result:
            self.on_result(config, stats, None)
        return stats

    def run(self, notifications: Iterable[WatchNotification]) -> int:
        """
        Consume notifications until the source is exhausted.

        Args:
            notifications: Change and error notifications

        Returns:
            Number of conversions started
        """
        log = safe_logger(self.logger)

        for notification in notifications:
            if notification.kind == ERROR:
                log.log_warning(f"Watch error: {notification.error}")
                continue

            if notification.path is not None and self.should_convert(notification.path):
                self.handle(notification.path)

        return self.conversions


class MarkdownEventHandler(FileSystemEventHandler):
    """Forwards file writes from the observer thread onto a queue."""

    def __init__(self, events: "queue.Queue[Optional[WatchNotification]]") -> None:
        super().__init__()
        self.events = events

    def _put(self, event: FileSystemEvent, path: bytes | str) -> None:
        if not event.is_directory:
            self.events.put(WatchNotification.change(os.fsdecode(path)))

    def on_modified(self, event: FileSystemEvent) -> None:
        self._put(event, event.src_path)

    def on_created(self, event: FileSystemEvent) -> None:
        self._put(event, event.src_path)

    def on_moved(self, event: FileSystemEvent) -> None:
        # Editors that save through a rename
        self._put(event, event.dest_path)


def iter_notifications(
    events: "queue.Queue[Optional[WatchNotification]]",
    observer: Observer,
    poll_interval: float = POLL_INTERVAL,
) -> Iterator[WatchNotification]:
    """
    Yield queued notifications until the source closes.

    The source is closed by a ``None`` sentinel on the queue, or when the
    observer thread has stopped; an observer that stopped on its own is
    reported as one error notification first.

    Args:
        events: Queue filled by MarkdownEventHandler
        observer: Running watchdog observer
        poll_interval: Seconds to wait for an item before checking the observer

    Yields:
        WatchNotification items
    """
    while True:
        try:
            item = events.get(timeout=poll_interval)
        except queue.Empty:
            if not observer.is_alive():
                yield WatchNotification.failure(
                    RuntimeError("File system observer stopped")
                )
                return
            continue

        if item is None:
            return
        yield item


def watch_directory(
    directory: Path,
    debouncer: WatchDebouncer,
    poll_interval: float = POLL_INTERVAL,
) -> int:
    """
    Watch a directory (non-recursively) and convert changed Markdown files.

    Blocks until the observer stops or the process is interrupted.

    Args:
        directory: Directory to watch
        debouncer: Consumer that decides and runs conversions
        poll_interval: Seconds between observer liveness checks

    Returns:
        Number of conversions started

    Raises:
        InputError: If ``directory`` is not a directory
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise InputError(f"Not a directory: {directory}")

    events: "queue.Queue[Optional[WatchNotification]]" = queue.Queue()
    observer = Observer()
    observer.schedule(MarkdownEventHandler(events), str(directory), recursive=False)
    observer.start()

    safe_logger(debouncer.logger).log_operation(
        "watch_start", {"directory": str(directory)}
    )

    try:
        return debouncer.run(iter_notifications(events, observer, poll_interval))
    finally:
        observer.stop()
        observer.join()
        safe_logger(debouncer.logger).log_operation(
            "watch_stop",
            {"directory": str(directory), "conversions": debouncer.conversions},
        )
