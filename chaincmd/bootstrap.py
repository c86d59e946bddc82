"""Application bootstrap.

Builds the chain registry, registers the commands, and wires the chain
listener into the application's lifecycle dispatcher. Everything is created
explicitly here; nothing in the package holds process-wide chain state.
"""

from typing import Dict, List, Optional

from chaincmd.application import Application
from chaincmd.chain import ChainExecutor, ChainRegistry, CommandChainListener
from chaincmd.commands import BarCommand, ChainListCommand, FooCommand
from chaincmd.config.schemas import ChainCmdConfig

# Master command name -> members in execution order
DEFAULT_CHAINS: Dict[str, List[str]] = {
    "foo:hello": ["bar:hi"],
}


def build_chain_registry(chains: Optional[Dict[str, List[str]]] = None) -> ChainRegistry:
    """Create a registry holding ``chains`` (the default chains if omitted)."""
    registry = ChainRegistry()
    for master, members in (DEFAULT_CHAINS if chains is None else chains).items():
        for member in members:
            registry.register(master, member)
    return registry


def create_application(
    config: Optional[ChainCmdConfig] = None,
    registry: Optional[ChainRegistry] = None,
    catch_exceptions: bool = True,
) -> Application:
    """Create the application with its commands and chain listener.

    Args:
        config: Application configuration, defaults apply if omitted
        registry: Chain registry, :data:`DEFAULT_CHAINS` if omitted
        catch_exceptions: Passed through to :class:`Application`

    Returns:
        Ready to run application
    """
    config = config or ChainCmdConfig()
    if registry is None:
        registry = build_chain_registry()

    application = Application(catch_exceptions=catch_exceptions)
    application.add(FooCommand())
    application.add(BarCommand(registry=registry))
    application.add(ChainListCommand(registry))

    executor = ChainExecutor(
        registry,
        application,
        continue_on_member_failure=config.chain.continue_on_member_failure,
    )
    application.dispatcher.subscribe(CommandChainListener(registry, executor))

    return application
