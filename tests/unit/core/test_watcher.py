"""Tests for the save watcher."""

import asyncio
import threading
from pathlib import Path

import pytest

from style_rank.core.exceptions import ParsingError
from style_rank.core.watcher import CodeFileHandler, FileWatcher


class StubAnalyzer:
    """Analyzer double returning a marker or raising a parse error."""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.calls: list[Path] = []
        self.threads: list[int] = []

    def analyze_file(self, path: Path):
        self.calls.append(path)
        self.threads.append(threading.get_ident())
        if self.fail:
            raise ParsingError(f"Syntax error in {path}")
        return f"result:{path.name}"


async def _noop(file_path: str) -> None:
    return None


@pytest.fixture
def handler():
    loop = asyncio.new_event_loop()
    yield CodeFileHandler(
        file_extensions=[".js", ".TS"],
        ignore_patterns={"node_modules", "dist"},
        callback=_noop,
        loop=loop,
    )
    loop.close()


class TestCodeFileHandler:
    """Test which saves are picked up."""

    def test_supported_extensions(self, handler):
        assert handler.should_process_file("/repo/src/app.js")
        assert handler.should_process_file("/repo/src/app.ts")

    def test_other_extensions_ignored(self, handler):
        assert not handler.should_process_file("/repo/README.md")
        assert not handler.should_process_file("/repo/src/app.py")

    def test_ignored_directories(self, handler):
        assert not handler.should_process_file("/repo/node_modules/lib/index.js")
        assert not handler.should_process_file("/repo/dist/bundle.js")


class TestDebounce:
    """Test rapid saves are collapsed."""

    @pytest.mark.asyncio
    async def test_saves_collapsed(self):
        seen: list[str] = []

        async def record(file_path: str) -> None:
            seen.append(file_path)

        handler = CodeFileHandler(
            file_extensions=[".js"],
            ignore_patterns=set(),
            callback=record,
            loop=asyncio.get_running_loop(),
            debounce_delay=0.05,
        )
        handler._schedule_change("/repo/b.js")
        handler._schedule_change("/repo/a.js")
        handler._schedule_change("/repo/b.js")

        await asyncio.sleep(0.3)

        assert seen == ["/repo/a.js", "/repo/b.js"]
        assert handler.pending_changes == set()


class TestFileWatcher:
    """Test analysis of saved files."""

    @pytest.mark.asyncio
    async def test_result_reported(self, tmp_path):
        path = tmp_path / "app.js"
        path.write_text("const a = 1;\n")
        results = []
        watcher = FileWatcher(tmp_path, StubAnalyzer(), on_result=results.append)

        await watcher._handle_file_change(str(path))

        assert results == ["result:app.js"]

    @pytest.mark.asyncio
    async def test_analysis_off_event_loop(self, tmp_path):
        path = tmp_path / "app.js"
        path.write_text("const a = 1;\n")
        analyzer = StubAnalyzer()
        watcher = FileWatcher(tmp_path, analyzer, on_result=lambda result: None)

        await watcher._handle_file_change(str(path))

        assert analyzer.calls == [path]
        assert analyzer.threads[0] != threading.get_ident()

    @pytest.mark.asyncio
    async def test_error_reported(self, tmp_path):
        path = tmp_path / "broken.js"
        path.write_text("function (\n")
        results, errors = [], []
        watcher = FileWatcher(
            tmp_path,
            StubAnalyzer(fail=True),
            on_result=results.append,
            on_error=lambda p, e: errors.append((p, e)),
        )

        await watcher._handle_file_change(str(path))

        assert results == []
        assert errors[0][0] == path
        assert isinstance(errors[0][1], ParsingError)

    @pytest.mark.asyncio
    async def test_error_without_callback(self, tmp_path):
        path = tmp_path / "broken.js"
        path.write_text("function (\n")
        watcher = FileWatcher(tmp_path, StubAnalyzer(fail=True), on_result=print)

        await watcher._handle_file_change(str(path))

    @pytest.mark.asyncio
    async def test_deleted_file_skipped(self, tmp_path):
        analyzer = StubAnalyzer()
        watcher = FileWatcher(tmp_path, analyzer, on_result=print)

        await watcher._handle_file_change(str(tmp_path / "gone.js"))

        assert analyzer.calls == []

    @pytest.mark.asyncio
    async def test_stop_when_not_running(self, tmp_path):
        watcher = FileWatcher(tmp_path, StubAnalyzer(), on_result=print)
        await watcher.stop()
        assert watcher.is_running is False


class TestClaimedChanges:
    """Test a newer save does not drop files already being processed."""

    @pytest.mark.asyncio
    async def test_batch_survives_cancel(self):
        seen: list[str] = []
        started = asyncio.Event()

        async def slow_record(file_path: str) -> None:
            started.set()
            await asyncio.sleep(0.1)
            seen.append(file_path)

        handler = CodeFileHandler(
            file_extensions=[".js"],
            ignore_patterns=set(),
            callback=slow_record,
            loop=asyncio.get_running_loop(),
            debounce_delay=0.05,
        )
        handler._schedule_change("/repo/a.js")
        handler._schedule_change("/repo/b.js")
        await asyncio.wait_for(started.wait(), timeout=1)

        handler._schedule_change("/repo/c.js")
        await asyncio.sleep(0.8)

        assert sorted(seen) == ["/repo/a.js", "/repo/b.js", "/repo/c.js"]
