"""Console command that outputs "Hi from Bar!"."""

from chaincmd.chain.member import ChainMemberCommand
from chaincmd.command import CommandInput, ExitStatus
from chaincmd.console import Output


class BarCommand(ChainMemberCommand):
    """Member of the foo:hello chain."""

    name = "bar:hi"
    description = 'Outputs "Hi from Bar!"'
    master = "foo:hello"

    def handle(self, input: CommandInput, output: Output) -> int:
        message = "Hi from Bar!"
        output.writeln(message)
        self.logger.info(message)

        return ExitStatus.SUCCESS
