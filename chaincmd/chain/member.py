"""Base class for commands that only run as chain members."""

from abc import abstractmethod
from typing import Optional

from chaincmd.chain.gate import FROM_MASTER_OPTION, is_chain_invocation, reject_standalone
from chaincmd.chain.registry import ChainRegistry
from chaincmd.command import Command, CommandInput
from chaincmd.console import Output


class ChainMemberCommand(Command):
    """Command that refuses to run unless its master triggered it.

    The check also covers callers that bypass the lifecycle hooks and call
    :meth:`run` directly. When a chain registry is given, the master named in
    the error is the one the registry lists, so both gates report the same
    chain; ``master`` is the fallback for commands built without one.
    """

    master: str = ""

    def __init__(
        self,
        name: Optional[str] = None,
        registry: Optional[ChainRegistry] = None,
        logger=None,
    ):
        self.registry = registry
        super().__init__(name=name, logger=logger)

    def configure(self) -> None:
        self.add_option(
            FROM_MASTER_OPTION,
            f"Indicates if this command was triggered by {self.resolve_master()}.",
        )

    def resolve_master(self) -> str:
        """Get the master this command is a member of."""
        if self.registry is not None:
            master = self.registry.master_of(self.name)
            if master is not None:
                return master
        return self.master

    def execute(self, input: CommandInput, output: Output) -> int:
        if not is_chain_invocation(input):
            return reject_standalone(self.name, self.resolve_master(), output, self.logger)
        return self.handle(input, output)

    @abstractmethod
    def handle(self, input: CommandInput, output: Output) -> int:
        """Do the member's work once the gate has passed."""
