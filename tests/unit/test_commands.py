"""Unit tests for FooCommand, BarCommand and ChainListCommand."""

import pytest

from chaincmd.application import Application
from chaincmd.chain import FROM_MASTER_OPTION, ChainRegistry
from chaincmd.command import CommandInput, ExitStatus
from chaincmd.commands import BarCommand, ChainListCommand, FooCommand
from chaincmd.console import BufferedOutput
from chaincmd.errors import InvalidOptionError
from chaincmd.testing import CommandTester

STANDALONE_ERROR = (
    "Error: bar:hi command is a member of foo:hello command chain "
    "and cannot be executed on its own."
)


class TestFooBarCommands:
    """Test the example commands run directly, without lifecycle hooks."""

    def test_foo_command_outputs_and_logs(self, mock_logger):
        tester = CommandTester(FooCommand(logger=mock_logger))

        assert tester.execute() == ExitStatus.SUCCESS
        assert "Hello from Foo!" in tester.get_display()
        mock_logger.info.assert_called_once_with("Hello from Foo!")

    def test_foo_command_executes_bar_command(self, mock_logger):
        """Run the master, then the member the way the chain does."""
        output = BufferedOutput()

        FooCommand(logger=mock_logger).run(CommandInput(), output)
        BarCommand(logger=mock_logger).run(CommandInput({FROM_MASTER_OPTION: True}), output)

        text = output.fetch()
        assert "Hello from Foo!" in text
        assert "Hi from Bar!" in text
        assert text.index("Hello from Foo!") < text.index("Hi from Bar!")

    def test_bar_command_cannot_be_executed_independently(self, mock_logger):
        tester = CommandTester(BarCommand(logger=mock_logger))

        status = tester.execute()

        assert status == ExitStatus.FAILURE
        assert STANDALONE_ERROR in tester.get_display()
        assert "Hi from Bar!" not in tester.get_display()
        mock_logger.error.assert_called_once_with(STANDALONE_ERROR)
        mock_logger.info.assert_not_called()

    def test_bar_command_with_false_flag_is_rejected(self, mock_logger):
        tester = CommandTester(BarCommand(logger=mock_logger))

        assert tester.execute({FROM_MASTER_OPTION: False}) == ExitStatus.FAILURE
        assert STANDALONE_ERROR in tester.get_display()

    def test_bar_command_declares_flag(self):
        command = BarCommand()

        assert FROM_MASTER_OPTION in command.options
        assert "foo:hello" in command.options[FROM_MASTER_OPTION]

    def test_bar_command_names_master_from_registry(self, mock_logger):
        registry = ChainRegistry()
        registry.register("release:all", "bar:hi")
        tester = CommandTester(BarCommand(registry=registry, logger=mock_logger))

        assert tester.execute() == ExitStatus.FAILURE
        expected = (
            "Error: bar:hi command is a member of release:all command chain "
            "and cannot be executed on its own."
        )
        assert expected in tester.get_display()
        mock_logger.error.assert_called_once_with(expected)

    def test_bar_command_falls_back_to_declared_master(self):
        command = BarCommand(registry=ChainRegistry())

        assert command.resolve_master() == "foo:hello"

    def test_undeclared_option_is_rejected(self):
        tester = CommandTester(FooCommand())

        with pytest.raises(InvalidOptionError) as exc_info:
            tester.execute({FROM_MASTER_OPTION: True})

        assert exc_info.value.option == FROM_MASTER_OPTION
        assert exc_info.value.error_code == "INVALID_OPTION"

    def test_display_requires_execution(self):
        with pytest.raises(RuntimeError):
            CommandTester(FooCommand()).get_display()


class TestChainListCommand:
    """Test listing registered chains."""

    def test_lists_chains(self, registry):
        application = Application()
        application.add(FooCommand())
        application.add(BarCommand())
        tester = CommandTester(application.add(ChainListCommand(registry)))

        assert tester.execute() == ExitStatus.SUCCESS
        display = tester.get_display()
        assert "foo:hello" in display
        assert "bar:hi" in display
        assert "missing" not in display

    def test_reports_missing_commands(self):
        registry = ChainRegistry()
        registry.register("foo:hello", "ghost:cmd")
        application = Application()
        application.add(FooCommand())
        tester = CommandTester(application.add(ChainListCommand(registry)))

        tester.execute()

        assert "missing: ghost:cmd" in tester.get_display()

    def test_empty_registry(self):
        tester = CommandTester(ChainListCommand(ChainRegistry()))

        assert tester.execute() == ExitStatus.SUCCESS
        assert "No command chains registered." in tester.get_display()
