"""Command registry and runner.

The :class:`Application` resolves commands by name and runs them between the
``BEFORE_EXECUTE`` and ``AFTER_EXECUTE`` lifecycle phases.
"""

import difflib
from typing import Dict, List, Optional

from chaincmd._version import __version__
from chaincmd.command import Command, CommandInput, ExitStatus
from chaincmd.console import ConsoleOutput, Output
from chaincmd.errors import ChainCmdError, CommandNotFoundError, InvalidOptionError
from chaincmd.logging_config import get_logger
from chaincmd.pipeline import AfterExecuteEvent, BeforeExecuteEvent, HookPhase, LifecycleDispatcher


class Application:
    """Registry of commands with lifecycle dispatch."""

    def __init__(
        self,
        name: str = "chaincmd",
        version: str = __version__,
        dispatcher: Optional[LifecycleDispatcher] = None,
        catch_exceptions: bool = True,
        logger=None,
    ):
        """Initialize application.

        Args:
            name: Application name
            version: Application version
            dispatcher: Lifecycle dispatcher, a new one is created if omitted
            catch_exceptions: Render errors and return FAILURE instead of raising
            logger: Logger to use, defaults to the command chain channel
        """
        self.name = name
        self.version = version
        self.dispatcher = dispatcher or LifecycleDispatcher(name)
        self.catch_exceptions = catch_exceptions
        self.logger = logger or get_logger()
        self._commands: Dict[str, Command] = {}

    def add(self, command: Command) -> Command:
        """Register a command, replacing any command with the same name."""
        if command.name in self._commands:
            self.logger.debug(f"Replacing command {command.name}")
        command.set_application(self)
        self._commands[command.name] = command
        return command

    def has(self, name: str) -> bool:
        return name in self._commands

    def find(self, name: str) -> Command:
        """Resolve a command by name.

        Raises:
            CommandNotFoundError: If no command is registered under ``name``
        """
        try:
            return self._commands[name]
        except KeyError:
            alternatives = difflib.get_close_matches(name, list(self._commands), n=3, cutoff=0.5)
            raise CommandNotFoundError(name, alternatives) from None

    def names(self) -> List[str]:
        return sorted(self._commands)

    def run(
        self,
        name: str,
        input: Optional[CommandInput] = None,
        output: Optional[Output] = None,
    ) -> int:
        """Find and run a command through the lifecycle hooks.

        Args:
            name: Command name
            input: Command input, empty if omitted
            output: Output sink, the console if omitted

        Returns:
            Exit status code, INVALID for undeclared options
        """
        input = input or CommandInput()
        output = output or ConsoleOutput()

        try:
            command = self.find(name)
            return self.run_command(command, input, output)
        except ChainCmdError as e:
            if not self.catch_exceptions:
                raise
            self.logger.error(f"Command {name} failed: {e}")
            output.write_error(e.format())
            if isinstance(e, InvalidOptionError):
                return ExitStatus.INVALID
            return ExitStatus.FAILURE
        except Exception as e:
            if not self.catch_exceptions:
                raise
            self.logger.exception(f"Command {name} raised an unexpected error")
            output.write_error(str(e) or e.__class__.__name__)
            return ExitStatus.FAILURE

    def run_command(self, command: Command, input: CommandInput, output: Output) -> int:
        """Run an already resolved command through the lifecycle hooks."""
        before = BeforeExecuteEvent(command, input, output)
        self.dispatcher.dispatch(HookPhase.BEFORE_EXECUTE, before)

        if not before.command_should_run:
            self.logger.debug(f"Command {command.name} was disabled by a hook")
            exit_code = ExitStatus.FAILURE
        else:
            try:
                exit_code = command.run(input, output)
            except Exception:
                self.dispatcher.dispatch(
                    HookPhase.AFTER_EXECUTE,
                    AfterExecuteEvent(command, input, output, exit_code=ExitStatus.FAILURE),
                )
                raise

        after = AfterExecuteEvent(command, input, output, exit_code=exit_code)
        self.dispatcher.dispatch(HookPhase.AFTER_EXECUTE, after)
        return int(after.exit_code)

    def __repr__(self) -> str:
        return f"Application(name={self.name}, commands={len(self._commands)})"
