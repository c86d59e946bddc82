"""Console command that outputs "Hello from Foo!"."""

from chaincmd.command import Command, CommandInput, ExitStatus
from chaincmd.console import Output


class FooCommand(Command):
    """Master command of the foo:hello chain."""

    name = "foo:hello"
    description = 'Outputs "Hello from Foo!"'

    def execute(self, input: CommandInput, output: Output) -> int:
        message = "Hello from Foo!"
        output.writeln(message)
        self.logger.info(message)

        return ExitStatus.SUCCESS
