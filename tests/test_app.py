"""Tests for the procview Textual menu."""

import pytest
from textual.widgets import Input, Log

from procview.app import ProcviewApp
from procview.config import ProcviewConfig
from procview.models import OperationStatus


def make_app(root) -> ProcviewApp:
    return ProcviewApp(ProcviewConfig(proc_root=root))


def log_text(app: ProcviewApp) -> str:
    return "\n".join(app.query_one("#output", Log).lines)


@pytest.mark.asyncio
async def test_app_creation(fake_proc):
    """Test ProcviewApp can be instantiated."""
    app = make_app(fake_proc)
    assert app.title == "procview"
    assert app.sub_title == "Process Filesystem Inspector"
    assert app.last_result is None


@pytest.mark.asyncio
async def test_app_compose(fake_proc):
    """Test ProcviewApp composes correctly."""
    app = make_app(fake_proc)
    async with app.run_test() as pilot:
        assert pilot.app.query_one("#pid-input") is not None
        assert pilot.app.query_one("#output") is not None


@pytest.mark.asyncio
async def test_app_quit_binding(fake_proc):
    """Test that 'q' binding triggers quit."""
    app = make_app(fake_proc)
    async with app.run_test() as pilot:
        await pilot.press("q")
        # App should be exiting
        assert pilot.app._exit


@pytest.mark.asyncio
async def test_list_binding(fake_proc):
    """Test F2 lists process directories into the log."""
    app = make_app(fake_proc)
    async with app.run_test() as pilot:
        await pilot.press("f2")
        await pilot.pause()

        assert app.last_result.status is OperationStatus.COMPLETE
        assert "Found 4 process directories" in log_text(app)


@pytest.mark.asyncio
async def test_inspect_binding_uses_input(fake_proc):
    """Test F3 inspects the pid typed in the input box."""
    app = make_app(fake_proc)
    async with app.run_test() as pilot:
        pilot.app.query_one("#pid-input", Input).value = "42"
        await pilot.press("f3")
        await pilot.pause()

        assert app.last_result.status is OperationStatus.COMPLETE
        text = log_text(app)
        assert "bash" in text
        assert "foo bar baz" in text


@pytest.mark.asyncio
async def test_inspect_partial_shows_diagnostic(fake_proc):
    """Test a missing command line is flagged in the log."""
    app = make_app(fake_proc)
    async with app.run_test() as pilot:
        pilot.app.query_one("#pid-input", Input).value = "7"
        await pilot.press("f3")
        await pilot.pause()

        assert app.last_result.status is OperationStatus.PARTIAL
        text = log_text(app)
        assert "[partial]" in text
        assert "! cmdline" in text


@pytest.mark.asyncio
async def test_inspect_rejects_non_numeric_input(fake_proc):
    """Test a non-numeric pid runs nothing."""
    app = make_app(fake_proc)
    async with app.run_test() as pilot:
        pilot.app.query_one("#pid-input", Input).value = "abc"
        await pilot.press("f3")
        await pilot.pause()

        assert app.last_result is None


@pytest.mark.asyncio
async def test_sysinfo_binding(fake_proc):
    """Test F4 shows the system summary."""
    app = make_app(fake_proc)
    async with app.run_test() as pilot:
        await pilot.press("f4")
        await pilot.pause()

        assert app.last_result.status is OperationStatus.COMPLETE
        assert "MemTotal:" in log_text(app)


@pytest.mark.asyncio
async def test_compare_binding(fake_proc):
    """Test F5 runs both reading strategies through a real descriptor."""
    app = make_app(fake_proc)
    async with app.run_test() as pilot:
        await pilot.press("f5")
        await pilot.pause()

        assert app.last_result.status is OperationStatus.COMPLETE
        assert log_text(app).count("Linux version 6.1.0-test") == 2
