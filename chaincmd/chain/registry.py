"""Registry of master commands and their chain members."""

from typing import Dict, List, Optional

from chaincmd.logging_config import get_logger


class ChainRegistry:
    """Maps master command names to their ordered member names.

    Registration order is execution order and a member is listed once per
    master. Names are not checked against the application here; a member
    that does not exist is reported when the chain runs.
    """

    def __init__(self, logger=None):
        self.logger = logger or get_logger()
        self._chains: Dict[str, List[str]] = {}

    def register(self, master: str, member: str) -> None:
        """Register ``member`` under ``master``. Registering twice is a no-op."""
        members = self._chains.setdefault(master, [])
        if member in members:
            return

        if self.is_master(member) or self.is_member(master) or member == master:
            # Multi-level chains are not supported
            self.logger.warning(
                f"{member} is registered under {master} but chains cannot nest; "
                "a command that is both master and member is handled as a master only"
            )

        members.append(member)
        self.logger.debug(f"Registered {member} as a member of {master} command chain")

    def is_master(self, name: str) -> bool:
        return name in self._chains

    def is_member(self, name: str) -> bool:
        return any(name in members for members in self._chains.values())

    def members(self, master: str) -> List[str]:
        """Get the members of a chain, empty for unknown masters."""
        return list(self._chains.get(master, []))

    def master_of(self, member: str) -> Optional[str]:
        """Get the first master, in registration order, listing ``member``."""
        for master, members in self._chains.items():
            if member in members:
                return master
        return None

    def chains(self) -> Dict[str, List[str]]:
        """Get a copy of the whole mapping."""
        return {master: list(members) for master, members in self._chains.items()}

    def __contains__(self, name: str) -> bool:
        return self.is_master(name) or self.is_member(name)

    def __len__(self) -> int:
        return len(self._chains)

    def __repr__(self) -> str:
        return f"ChainRegistry(chains={self._chains})"
