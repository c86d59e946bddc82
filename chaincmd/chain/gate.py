"""Standalone execution gate for chain members.

Both the lifecycle listener and :class:`~chaincmd.chain.member.ChainMemberCommand`
reject standalone member runs through :func:`reject_standalone`, so the flag
name and the error text live here only.
"""

from chaincmd.command import CommandInput, ExitStatus
from chaincmd.console import Output
from chaincmd.logging_config import get_logger

FROM_MASTER_OPTION = "from-master"

STANDALONE_ERROR = (
    "Error: {member} command is a member of {master} command chain "
    "and cannot be executed on its own."
)


def is_chain_invocation(input: CommandInput) -> bool:
    """Check whether the input carries the invoked-as-chain-member flag."""
    return bool(input.get_option(FROM_MASTER_OPTION, False))


def chain_member_input() -> CommandInput:
    """Build the input the chain executor passes to every member."""
    return CommandInput({FROM_MASTER_OPTION: True})


def standalone_error_message(member: str, master: str) -> str:
    return STANDALONE_ERROR.format(member=member, master=master)


def reject_standalone(member: str, master: str, output: Output, logger=None) -> int:
    """Write and log the standalone error for ``member``.

    Returns:
        ExitStatus.FAILURE
    """
    message = standalone_error_message(member, master)
    output.writeln(message)
    (logger or get_logger()).error(message)
    return ExitStatus.FAILURE
