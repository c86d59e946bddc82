"""Testing helpers for chaincmd commands."""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from chaincmd.application import Application
from chaincmd.command import Command, CommandInput, ExitStatus
from chaincmd.console import BufferedOutput


@dataclass
class CommandResult:
    """Result of command execution."""

    exit_code: int
    output: str

    @property
    def success(self) -> bool:
        """Check if command succeeded."""
        return self.exit_code == ExitStatus.SUCCESS


class CommandTester:
    """Runs a single command directly against a buffered output.

    Lifecycle hooks are bypassed, so the command's own checks are what is
    being tested.
    """

    def __init__(self, command: Command):
        self.command = command
        self.input: Optional[CommandInput] = None
        self.output: Optional[BufferedOutput] = None
        self.status_code: Optional[int] = None

    def execute(self, options: Optional[Dict[str, Any]] = None) -> int:
        """Run the command with the given options and return its status."""
        self.input = CommandInput(options)
        self.output = BufferedOutput()
        self.status_code = self.command.run(self.input, self.output)
        return self.status_code

    def get_display(self) -> str:
        """Get everything the command wrote."""
        if self.output is None:
            raise RuntimeError("Output not initialized, did you execute the command before requesting the display?")
        return self.output.getvalue()


class ApplicationTester:
    """Runs commands through an application's lifecycle hooks."""

    def __init__(self, application: Application):
        self.application = application

    def run(self, name: str, options: Optional[Dict[str, Any]] = None) -> CommandResult:
        output = BufferedOutput()
        exit_code = self.application.run(name, CommandInput(options), output)
        return CommandResult(exit_code=exit_code, output=output.getvalue())


def assert_success(result: CommandResult) -> None:
    """Assert command succeeded."""
    assert result.success, f"Command failed with exit code {result.exit_code}:\n{result.output}"


def assert_failure(result: CommandResult, exit_code: Optional[int] = None) -> None:
    """Assert command failed."""
    assert not result.success, f"Command unexpectedly succeeded:\n{result.output}"
    if exit_code is not None:
        assert result.exit_code == exit_code, f"Expected exit code {exit_code}, got {result.exit_code}"


def assert_output_contains(result: CommandResult, *texts: str) -> None:
    """Assert output contains every text."""
    for text in texts:
        assert text in result.output, f"Expected {text!r} in output:\n{result.output}"
