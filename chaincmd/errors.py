"""Exception hierarchy for chaincmd.

Every error raised by the package derives from :class:`ChainCmdError`, which
carries a generated error code and optional suggestions for the user.
"""

from typing import List, Optional, Sequence


class ChainCmdError(Exception):
    """Base exception class for chaincmd."""

    def __init__(
        self,
        message: str,
        *,
        error_code: Optional[str] = None,
        suggestions: Optional[Sequence[str]] = None,
    ):
        """Initialize error.

        Args:
            message: Human-readable error message
            error_code: Unique error code for programmatic handling
            suggestions: Hints shown to the user alongside the message
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self._generate_error_code()
        self.suggestions: List[str] = list(suggestions or [])

    def _generate_error_code(self) -> str:
        """Generate an error code based on the error type."""
        class_name = self.__class__.__name__
        # Convert CamelCase to UPPER_SNAKE_CASE
        code = ""
        for i, char in enumerate(class_name):
            if i > 0 and char.isupper() and class_name[i - 1].islower():
                code += "_"
            code += char.upper()
        return code.replace("_ERROR", "")

    def format(self) -> str:
        """Format the message together with its suggestions."""
        if not self.suggestions:
            return self.message
        lines = [self.message, ""]
        lines.extend(f"  {suggestion}" for suggestion in self.suggestions)
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.message


class CommandNotFoundError(ChainCmdError):
    """Raised when a command name does not resolve in the application."""

    def __init__(self, name: str, alternatives: Optional[Sequence[str]] = None):
        self.name = name
        self.alternatives = list(alternatives or [])
        message = f'Command "{name}" is not defined.'
        suggestions = []
        if self.alternatives:
            suggestions.append("Did you mean one of these?")
            suggestions.extend(self.alternatives)
        super().__init__(message, suggestions=suggestions)


class InvalidOptionError(ChainCmdError):
    """Raised when a command receives an option it does not declare."""

    def __init__(self, command: str, option: str):
        self.command = command
        self.option = option
        super().__init__(f'The "--{option}" option does not exist for "{command}".')


class ConfigurationError(ChainCmdError):
    """Raised when configuration cannot be loaded or validated."""


class ChainExecutionError(ChainCmdError):
    """Raised when a chain member fails and the chain must not continue."""

    def __init__(self, master: str, member: str, reason: str):
        self.master = master
        self.member = member
        self.reason = reason
        super().__init__(
            f"Execution of {master} chain aborted at {member}: {reason}",
            suggestions=["Set chain.continue_on_member_failure to true to skip failing members."],
        )
