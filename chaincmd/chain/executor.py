"""Sequential execution of a master command's chain members."""

from dataclasses import dataclass
from typing import List, Optional, Protocol

from chaincmd.chain.gate import chain_member_input
from chaincmd.chain.registry import ChainRegistry
from chaincmd.command import Command, ExitStatus
from chaincmd.console import Output
from chaincmd.errors import ChainExecutionError, CommandNotFoundError
from chaincmd.logging_config import get_logger


class CommandFinder(Protocol):
    """Anything that resolves command names, usually the Application."""

    def find(self, name: str) -> Command:
        ...


@dataclass
class MemberOutcome:
    """What happened to one member during a chain run."""

    member: str
    exit_code: Optional[int] = None
    error: Optional[BaseException] = None

    @property
    def found(self) -> bool:
        return self.exit_code is not None

    @property
    def succeeded(self) -> bool:
        return self.exit_code == ExitStatus.SUCCESS


class ChainExecutor:
    """Runs the members of a chain in registration order.

    By default a member that cannot be resolved, returns a failure status or
    raises, is logged and skipped and the remaining members still run. With
    ``continue_on_member_failure=False`` the first such member raises
    :class:`ChainExecutionError` instead.
    """

    def __init__(
        self,
        registry: ChainRegistry,
        commands: CommandFinder,
        continue_on_member_failure: bool = True,
        logger=None,
    ):
        self.registry = registry
        self.commands = commands
        self.continue_on_member_failure = continue_on_member_failure
        self.logger = logger or get_logger()

    def run(self, master: str, output: Output) -> List[MemberOutcome]:
        """Run every member of ``master`` against ``output``.

        Args:
            master: Master command name
            output: Output sink of the master run

        Returns:
            One outcome per member, in execution order
        """
        self.logger.info(f"Executing {master} chain members:")

        outcomes = []
        for member in self.registry.members(master):
            outcome = self._run_member(member, output)
            outcomes.append(outcome)

            if not outcome.succeeded and not self.continue_on_member_failure:
                raise ChainExecutionError(master, member, self._failure_reason(outcome))

        self.logger.info(f"Execution of {master} chain completed.")
        return outcomes

    def _run_member(self, member: str, output: Output) -> MemberOutcome:
        try:
            command = self.commands.find(member)
        except CommandNotFoundError:
            self.logger.error(f"Command {member} not found.")
            return MemberOutcome(member)

        try:
            exit_code = command.run(chain_member_input(), output)
        except Exception as e:
            self.logger.exception(f"Chain member {member} raised an error")
            return MemberOutcome(member, ExitStatus.FAILURE, error=e)

        if exit_code != ExitStatus.SUCCESS:
            self.logger.warning(f"Chain member {member} finished with exit status {exit_code}")
        return MemberOutcome(member, exit_code)

    @staticmethod
    def _failure_reason(outcome: MemberOutcome) -> str:
        if not outcome.found:
            return "command not found"
        if outcome.error is not None:
            return f"raised {outcome.error.__class__.__name__}: {outcome.error}"
        return f"exit status {outcome.exit_code}"
