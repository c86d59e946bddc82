"""Base command primitives.

A :class:`Command` is a named, executable unit. It declares the options it
accepts and implements :meth:`Command.execute`; callers go through
:meth:`Command.run`, which validates the input first.
"""

from abc import ABC, abstractmethod
from enum import IntEnum
from typing import TYPE_CHECKING, Any, Dict, Optional

from chaincmd.console import Output
from chaincmd.errors import InvalidOptionError
from chaincmd.logging_config import get_logger

if TYPE_CHECKING:
    from chaincmd.application import Application


class ExitStatus(IntEnum):
    """Command exit status."""

    SUCCESS = 0
    FAILURE = 1
    INVALID = 2


class CommandInput:
    """Options passed to a command invocation."""

    def __init__(self, options: Optional[Dict[str, Any]] = None):
        self.options: Dict[str, Any] = dict(options or {})

    def get_option(self, name: str, default: Any = None) -> Any:
        """Get option value."""
        return self.options.get(name, default)

    def __repr__(self) -> str:
        return f"CommandInput(options={self.options})"


class Command(ABC):
    """Base class for all commands."""

    name: str = ""
    description: str = ""

    def __init__(self, name: Optional[str] = None, logger=None):
        """Initialize command.

        Args:
            name: Command name, defaults to the class attribute
            logger: Logger to use, defaults to the command chain channel
        """
        self.name = name or self.name
        if not self.name:
            raise ValueError(f"{self.__class__.__name__} has no command name")

        self.logger = logger or get_logger()
        self.options: Dict[str, str] = {}
        self._application: Optional["Application"] = None
        self.configure()

    def configure(self) -> None:
        """Declare options. Subclasses override this."""

    def add_option(self, name: str, help: str = "") -> "Command":
        """Declare a boolean option."""
        self.options[name] = help
        return self

    @property
    def application(self) -> Optional["Application"]:
        """Application the command is registered with, if any."""
        return self._application

    def set_application(self, application: Optional["Application"]) -> None:
        self._application = application

    def validate_input(self, input: CommandInput) -> None:
        """Reject options the command does not declare."""
        for option in input.options:
            if option not in self.options:
                raise InvalidOptionError(self.name, option)

    def run(self, input: CommandInput, output: Output) -> int:
        """Run the command.

        Args:
            input: Command input
            output: Output sink

        Returns:
            Exit status code
        """
        self.validate_input(input)
        return int(self.execute(input, output))

    @abstractmethod
    def execute(self, input: CommandInput, output: Output) -> int:
        """Execute the command. Must be implemented by subclasses."""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name})"
