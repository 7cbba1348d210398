"""procview - interactive Textual menu."""

import tempfile
from collections.abc import Callable

from textual.app import App, ComposeResult
from textual.widgets import Footer, Input, Log

from procview.config import ProcviewConfig
from procview.models import OperationResult
from procview.procfs import is_number
from procview.reader import ProcReader


class ProcviewApp(App):
    """Menu-driven front end for the four procview operations."""

    TITLE = "procview"
    SUB_TITLE = "Process Filesystem Inspector"

    CSS = """
    Screen {
        layout: vertical;
    }

    #pid-input {
        dock: top;
        height: 3;
    }

    #output {
        height: 1fr;
        border: solid $primary;
    }
    """

    # Leave the PID box unfocused so single-key bindings reach the app
    AUTO_FOCUS = None

    BINDINGS = [
        ("f2", "list", "Processes"),
        ("f3", "inspect", "Inspect PID"),
        ("f4", "sysinfo", "System"),
        ("f5", "compare", "Compare"),
        ("q", "quit", "Quit"),
    ]

    def __init__(self, config: ProcviewConfig | None = None) -> None:
        """Initialize the ProcviewApp."""
        super().__init__()
        self._config = config or ProcviewConfig()
        self._last_result: OperationResult | None = None

    @property
    def last_result(self) -> OperationResult | None:
        """Result of the most recent operation, if any ran."""
        return self._last_result

    def compose(self) -> ComposeResult:
        """Compose the application layout."""
        yield Input(placeholder="PID (Enter or F3 to inspect)", id="pid-input")
        yield Log(id="output")
        yield Footer()

    def action_list(self) -> None:
        self._run("Process directories", lambda reader: reader.list_process_directories())

    def action_inspect(self) -> None:
        """Inspect the process whose id is typed in the input box."""
        pid_text = self.query_one("#pid-input", Input).value.strip()
        if not is_number(pid_text):
            self.notify("Enter a numeric PID", severity="warning")
            return
        self._run(f"PID {pid_text}", lambda reader: reader.read_process_info(pid_text))

    def action_sysinfo(self) -> None:
        self._run("System information", lambda reader: reader.show_system_info())

    def action_compare(self) -> None:
        self._run("Method comparison", lambda reader: reader.compare_file_methods())

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Run the inspector when Enter is pressed in the PID box."""
        self.action_inspect()

    def _run(self, title: str, operation: Callable[[ProcReader], OperationResult]) -> None:
        """
        Run an operation and show its report in the log.

        Reports are captured through a real file so the raw comparison
        strategy has a descriptor to write to.
        """
        with tempfile.TemporaryFile("w+", encoding="utf-8") as capture:
            result = operation(ProcReader(self._config, stream=capture))
            capture.flush()
            capture.seek(0)
            report = capture.read()

        log = self.query_one("#output", Log)
        log.clear()
        log.write_line(f"== {title} ==")
        log.write(report)
        log.write_line(f"[{result.status.value}]")
        for message in result.diagnostics:
            log.write_line(f"! {message}")
        self._last_result = result
