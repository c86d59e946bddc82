"""Command lifecycle hooks.

Provides support for:
- Before and after execute hooks
- Priority ordering of hooks
- Disabling a pending command from a hook
"""

from chaincmd.pipeline.base import (
    DEFAULT_PRIORITY,
    AfterExecuteEvent,
    BeforeExecuteEvent,
    CommandEvent,
    HookPhase,
    HookRegistration,
    LifecycleDispatcher,
)

__all__ = [
    "DEFAULT_PRIORITY",
    "AfterExecuteEvent",
    "BeforeExecuteEvent",
    "CommandEvent",
    "HookPhase",
    "HookRegistration",
    "LifecycleDispatcher",
]
