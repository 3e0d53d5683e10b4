"""File system watcher re-running analysis when source files are saved."""

import asyncio
import time
from collections.abc import Awaitable, Callable, Iterable
from concurrent.futures import Future
from pathlib import Path

from loguru import logger
from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from ..analysis.analyzer import StyleAnalyzer
from ..analysis.metrics import AnalysisResult
from ..config.defaults import DEFAULT_DEBOUNCE_SECONDS, DEFAULT_IGNORE_PATTERNS
from .exceptions import StyleRankError

ResultCallback = Callable[[AnalysisResult], None]
ErrorCallback = Callable[[Path, StyleRankError], None]


class CodeFileHandler(FileSystemEventHandler):
    """Handler for source file saves."""

    def __init__(
        self,
        file_extensions: Iterable[str],
        ignore_patterns: Iterable[str],
        callback: Callable[[str], Awaitable[None]],
        loop: asyncio.AbstractEventLoop,
        debounce_delay: float = DEFAULT_DEBOUNCE_SECONDS,
    ):
        """Initialize file handler.

        Args:
            file_extensions: File extensions to watch
            ignore_patterns: Directory names to ignore
            callback: Async callback receiving the saved file's path
            loop: Event loop to schedule tasks on
            debounce_delay: Delay in seconds to debounce rapid saves
        """
        super().__init__()
        self.file_extensions = {ext.lower() for ext in file_extensions}
        self.ignore_patterns = set(ignore_patterns)
        self.callback = callback
        self.loop = loop
        self.debounce_delay = debounce_delay
        self.pending_changes: set[str] = set()
        self.last_change_time: float = 0
        self.debounce_task: Future | None = None

    def should_process_file(self, file_path: str) -> bool:
        """Check if file should be processed."""
        path = Path(file_path)

        if path.suffix.lower() not in self.file_extensions:
            return False

        return not any(part in self.ignore_patterns for part in path.parts)

    def on_modified(self, event: FileSystemEvent) -> None:
        """Handle file modification."""
        if not event.is_directory and self.should_process_file(event.src_path):
            self._schedule_change(event.src_path)

    def on_created(self, event: FileSystemEvent) -> None:
        """Handle file creation."""
        if not event.is_directory and self.should_process_file(event.src_path):
            self._schedule_change(event.src_path)

    def on_moved(self, event: FileSystemEvent) -> None:
        """Handle atomic saves (write to temp file, rename over target)."""
        dest_path = getattr(event, "dest_path", None)
        if not event.is_directory and dest_path and self.should_process_file(dest_path):
            self._schedule_change(dest_path)

    def _schedule_change(self, file_path: str) -> None:
        """Schedule a file for analysis with debouncing."""
        self.pending_changes.add(file_path)
        self.last_change_time = time.time()

        if self.debounce_task and not self.debounce_task.done():
            self.debounce_task.cancel()

        self.debounce_task = asyncio.run_coroutine_threadsafe(
            self._debounced_process(), self.loop
        )

    async def _debounced_process(self) -> None:
        """Process pending saves after debounce delay."""
        await asyncio.sleep(self.debounce_delay)

        # More saves arrived during the delay; a later task handles them
        if time.time() - self.last_change_time < self.debounce_delay:
            return

        changes = sorted(self.pending_changes)
        self.pending_changes.clear()

        # Claimed changes finish even if a newer save cancels this task
        await asyncio.shield(self._process_changes(changes))

    async def _process_changes(self, changes: list[str]) -> None:
        for file_path in changes:
            try:
                await self.callback(file_path)
            except Exception as e:
                logger.error(f"Error processing file change {file_path}: {e}")


class FileWatcher:
    """Watches a directory and analyzes every saved source file."""

    def __init__(
        self,
        root: Path,
        analyzer: StyleAnalyzer,
        on_result: ResultCallback,
        on_error: ErrorCallback | None = None,
        debounce_delay: float = DEFAULT_DEBOUNCE_SECONDS,
    ):
        """Initialize file watcher.

        Args:
            root: Directory to watch (recursively)
            analyzer: Analyzer used for every saved file
            on_result: Called with each fresh analysis result
            on_error: Called when a saved file cannot be analyzed
            debounce_delay: Seconds to wait for saves to settle
        """
        self.root = root
        self.analyzer = analyzer
        self.on_result = on_result
        self.on_error = on_error
        self.debounce_delay = debounce_delay
        self.observer: Observer | None = None
        self.handler: CodeFileHandler | None = None
        self.is_running = False
        # One analysis at a time; parsers are not shared across threads
        self._analysis_lock = asyncio.Lock()

    async def start(self) -> None:
        """Start watching for file changes."""
        if self.is_running:
            logger.warning("File watcher is already running")
            return

        logger.info(f"Starting file watcher for {self.root}")

        loop = asyncio.get_running_loop()
        self.handler = CodeFileHandler(
            file_extensions=self.analyzer.registry.get_supported_extensions(),
            ignore_patterns=DEFAULT_IGNORE_PATTERNS,
            callback=self._handle_file_change,
            loop=loop,
            debounce_delay=self.debounce_delay,
        )

        self.observer = Observer()
        self.observer.schedule(self.handler, str(self.root), recursive=True)
        self.observer.start()
        self.is_running = True

        logger.info("File watcher started successfully")

    async def stop(self) -> None:
        """Stop watching for file changes."""
        if not self.is_running:
            return

        logger.info("Stopping file watcher")

        if self.observer:
            self.observer.stop()
            self.observer.join()
            self.observer = None

        self.handler = None
        self.is_running = False

        logger.info("File watcher stopped")

    async def _handle_file_change(self, file_path: str) -> None:
        """Analyze a saved file and report the result.

        Args:
            file_path: Path to the saved file
        """
        path = Path(file_path)
        if not path.exists():
            logger.debug(f"File no longer exists: {path}")
            return

        logger.debug(f"Analyzing saved file: {path}")
        try:
            async with self._analysis_lock:
                result = await asyncio.to_thread(self.analyzer.analyze_file, path)
        except StyleRankError as e:
            logger.warning(f"Skipping {path}: {e}")
            if self.on_error is not None:
                self.on_error(path, e)
            return

        self.on_result(result)

    async def __aenter__(self):
        """Async context manager entry."""
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.stop()
