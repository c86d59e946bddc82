"""Lifecycle hooks dispatched around command execution."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Tuple

from loguru import logger

from chaincmd.command import Command, CommandInput, ExitStatus
from chaincmd.console import Output

DEFAULT_PRIORITY = 50


class HookPhase(Enum):
    """Command lifecycle phases."""

    BEFORE_EXECUTE = "before_execute"
    AFTER_EXECUTE = "after_execute"


@dataclass
class CommandEvent:
    """Base event carrying the command and its input/output pair."""

    command: Command
    input: CommandInput
    output: Output

    @property
    def command_name(self) -> str:
        return self.command.name


@dataclass
class BeforeExecuteEvent(CommandEvent):
    """Dispatched before a command runs. Listeners may disable the command."""

    command_should_run: bool = True

    def disable_command(self) -> None:
        """Prevent the pending command from running."""
        self.command_should_run = False

    def enable_command(self) -> None:
        self.command_should_run = True


@dataclass
class AfterExecuteEvent(CommandEvent):
    """Dispatched after a command ran, or was disabled."""

    exit_code: int = ExitStatus.SUCCESS

    @property
    def succeeded(self) -> bool:
        return self.exit_code == ExitStatus.SUCCESS


@dataclass
class HookRegistration:
    """A callback registered for one phase."""

    phase: HookPhase
    callback: Callable[[Any], None]
    priority: int = DEFAULT_PRIORITY
    name: str = field(default="")

    def __post_init__(self):
        if not self.name:
            self.name = getattr(self.callback, "__qualname__", repr(self.callback))


class LifecycleDispatcher:
    """Runs registered callbacks for each lifecycle phase.

    Callbacks run synchronously in ascending priority order; callbacks with
    equal priority run in registration order.
    """

    def __init__(self, name: Optional[str] = None):
        """Initialize dispatcher."""
        self.name = name or "LifecycleDispatcher"
        self._registrations: List[HookRegistration] = []
        self._hook_cache: Dict[HookPhase, List[HookRegistration]] = {}

    def add_listener(
        self,
        phase: HookPhase,
        callback: Callable[[Any], None],
        priority: int = DEFAULT_PRIORITY,
        name: Optional[str] = None,
    ) -> "LifecycleDispatcher":
        """Register a callback for a phase.

        Args:
            phase: Phase to run in
            callback: Callable receiving the phase event
            priority: Execution priority (lower executes first)
            name: Name used in debug logs
        """
        registration = HookRegistration(phase, callback, priority, name or "")
        self._registrations.append(registration)
        self._invalidate_cache()
        logger.debug(f"Added hook {registration.name} to {phase.value} with priority {priority}")
        return self

    def remove_listener(self, phase: HookPhase, callback: Callable[[Any], None]) -> "LifecycleDispatcher":
        """Remove a callback from a phase."""
        self._registrations = [
            r for r in self._registrations
            if not (r.phase == phase and r.callback == callback)
        ]
        self._invalidate_cache()
        return self

    def subscribe(self, subscriber: Any) -> "LifecycleDispatcher":
        """Register every hook a subscriber declares.

        The subscriber exposes ``subscribed_hooks()`` returning a mapping of
        phase to ``(callback, priority)``.
        """
        hooks: Dict[HookPhase, Tuple[Callable[[Any], None], int]] = subscriber.subscribed_hooks()
        for phase, (callback, priority) in hooks.items():
            self.add_listener(phase, callback, priority)
        return self

    def _invalidate_cache(self) -> None:
        self._hook_cache.clear()

    def listeners(self, phase: HookPhase) -> List[HookRegistration]:
        """Get registrations for a phase in execution order."""
        if phase not in self._hook_cache:
            phase_hooks = [r for r in self._registrations if r.phase == phase]
            phase_hooks.sort(key=lambda r: r.priority)
            self._hook_cache[phase] = phase_hooks
        return self._hook_cache[phase]

    def dispatch(self, phase: HookPhase, event: CommandEvent) -> CommandEvent:
        """Run all callbacks for a phase and return the event."""
        for registration in self.listeners(phase):
            logger.debug(f"Executing hook {registration.name} in phase {phase.value}")
            registration.callback(event)
        return event

    def __len__(self) -> int:
        return len(self._registrations)

    def __repr__(self) -> str:
        return f"LifecycleDispatcher(name={self.name}, hooks={len(self._registrations)})"
