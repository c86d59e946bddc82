"""Lifecycle listener that enables command chaining.

Before a command runs, the listener announces masters and blocks members
invoked on their own. After a master finishes successfully, it hands the
master's output to the :class:`~chaincmd.chain.executor.ChainExecutor`.
"""

from typing import Any, Callable, Dict, Set, Tuple

from chaincmd.chain.executor import ChainExecutor
from chaincmd.chain.gate import reject_standalone
from chaincmd.chain.registry import ChainRegistry
from chaincmd.logging_config import get_logger
from chaincmd.pipeline import AfterExecuteEvent, BeforeExecuteEvent, HookPhase

# Gate members before other hooks see the command
BEFORE_EXECUTE_PRIORITY = 10
# Run the chain once other hooks are done with the master
AFTER_EXECUTE_PRIORITY = 90


class CommandChainListener:
    """Intercepts the command lifecycle for masters and members."""

    def __init__(self, registry: ChainRegistry, executor: ChainExecutor, logger=None):
        self.registry = registry
        self.executor = executor
        self.logger = logger or get_logger()
        # Masters whose registration was already logged
        self._announced: Set[str] = set()

    def subscribed_hooks(self) -> Dict[HookPhase, Tuple[Callable[[Any], None], int]]:
        return {
            HookPhase.BEFORE_EXECUTE: (self.on_before_execute, BEFORE_EXECUTE_PRIORITY),
            HookPhase.AFTER_EXECUTE: (self.on_after_execute, AFTER_EXECUTE_PRIORITY),
        }

    def on_before_execute(self, event: BeforeExecuteEvent) -> None:
        name = event.command_name

        if self.registry.is_master(name):
            self._handle_master(name)
            return

        if self.registry.is_member(name):
            self._handle_member(event, name)

    def on_after_execute(self, event: AfterExecuteEvent) -> None:
        name = event.command_name

        if not self.registry.is_master(name) or not event.succeeded:
            return

        self.executor.run(name, event.output)

    def _handle_master(self, name: str) -> None:
        if name not in self._announced:
            self._log_master_registration(name)
            self._announced.add(name)

        self.logger.info(f"Executing {name} command itself first:")

    def _handle_member(self, event: BeforeExecuteEvent, name: str) -> None:
        # Chain runs call Command.run directly, so a dispatched member is standalone
        reject_standalone(name, self.registry.master_of(name), event.output, self.logger)
        event.disable_command()

    def _log_master_registration(self, master: str) -> None:
        self.logger.info(
            f"{master} is a master command of a command chain that has registered member commands"
        )
        for member in self.registry.members(master):
            self.logger.info(f"{member} registered as a member of {master} command chain")
