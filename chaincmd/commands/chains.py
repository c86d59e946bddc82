"""Console command that lists the registered command chains."""

from typing import List

from chaincmd.chain.registry import ChainRegistry
from chaincmd.command import Command, CommandInput, ExitStatus
from chaincmd.console import Output, create_table


class ChainListCommand(Command):
    """Show every master command with its members in execution order."""

    name = "chain:list"
    description = "List registered command chains"

    def __init__(self, registry: ChainRegistry, logger=None):
        self.registry = registry
        super().__init__(logger=logger)

    def _missing(self, names: List[str]) -> List[str]:
        if self.application is None:
            return []
        return [name for name in names if not self.application.has(name)]

    def execute(self, input: CommandInput, output: Output) -> int:
        chains = self.registry.chains()
        if not chains:
            output.writeln("No command chains registered.")
            return ExitStatus.SUCCESS

        table = create_table("Command chains", ["Master", "Members", "Status"])
        for master, members in chains.items():
            missing = self._missing([master, *members])
            status = f"missing: {', '.join(missing)}" if missing else "ok"
            table.add_row(master, ", ".join(members), status)
        output.render(table)

        return ExitStatus.SUCCESS
