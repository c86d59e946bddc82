"""Command chaining.

A master command that succeeds triggers its members in registration order.
Members reject standalone runs both at the lifecycle layer and in their own
``execute``.
"""

from chaincmd.chain.executor import ChainExecutor, MemberOutcome
from chaincmd.chain.gate import (
    FROM_MASTER_OPTION,
    chain_member_input,
    is_chain_invocation,
    reject_standalone,
    standalone_error_message,
)
from chaincmd.chain.listener import CommandChainListener
from chaincmd.chain.member import ChainMemberCommand
from chaincmd.chain.registry import ChainRegistry

__all__ = [
    "FROM_MASTER_OPTION",
    "ChainExecutor",
    "ChainMemberCommand",
    "ChainRegistry",
    "CommandChainListener",
    "MemberOutcome",
    "chain_member_input",
    "is_chain_invocation",
    "reject_standalone",
    "standalone_error_message",
]
