"""Unit tests for the lifecycle dispatcher."""

from chaincmd.command import CommandInput, ExitStatus
from chaincmd.commands import FooCommand
from chaincmd.console import BufferedOutput
from chaincmd.pipeline import AfterExecuteEvent, BeforeExecuteEvent, HookPhase, LifecycleDispatcher


def make_before_event() -> BeforeExecuteEvent:
    return BeforeExecuteEvent(FooCommand(), CommandInput(), BufferedOutput())


class TestLifecycleDispatcher:
    """Test hook registration and dispatch order."""

    def test_hooks_run_in_priority_order(self):
        dispatcher = LifecycleDispatcher()
        calls = []

        dispatcher.add_listener(HookPhase.BEFORE_EXECUTE, lambda e: calls.append("late"), priority=90)
        dispatcher.add_listener(HookPhase.BEFORE_EXECUTE, lambda e: calls.append("early"), priority=10)
        dispatcher.add_listener(HookPhase.BEFORE_EXECUTE, lambda e: calls.append("default"))

        dispatcher.dispatch(HookPhase.BEFORE_EXECUTE, make_before_event())

        assert calls == ["early", "default", "late"]

    def test_equal_priority_keeps_registration_order(self):
        dispatcher = LifecycleDispatcher()
        calls = []

        for name in ("first", "second", "third"):
            dispatcher.add_listener(HookPhase.BEFORE_EXECUTE, lambda e, n=name: calls.append(n))

        dispatcher.dispatch(HookPhase.BEFORE_EXECUTE, make_before_event())

        assert calls == ["first", "second", "third"]

    def test_hooks_only_run_for_their_phase(self):
        dispatcher = LifecycleDispatcher()
        calls = []
        dispatcher.add_listener(HookPhase.AFTER_EXECUTE, lambda e: calls.append("after"))

        dispatcher.dispatch(HookPhase.BEFORE_EXECUTE, make_before_event())

        assert calls == []

    def test_remove_listener(self):
        dispatcher = LifecycleDispatcher()
        calls = []

        def hook(event):
            calls.append("hook")

        dispatcher.add_listener(HookPhase.BEFORE_EXECUTE, hook)
        dispatcher.dispatch(HookPhase.BEFORE_EXECUTE, make_before_event())
        dispatcher.remove_listener(HookPhase.BEFORE_EXECUTE, hook)
        dispatcher.dispatch(HookPhase.BEFORE_EXECUTE, make_before_event())

        assert calls == ["hook"]
        assert len(dispatcher) == 0

    def test_subscribe_registers_declared_hooks(self):
        class Subscriber:
            def __init__(self):
                self.seen = []

            def subscribed_hooks(self):
                return {
                    HookPhase.BEFORE_EXECUTE: (self.before, 10),
                    HookPhase.AFTER_EXECUTE: (self.after, 90),
                }

            def before(self, event):
                self.seen.append("before")

            def after(self, event):
                self.seen.append("after")

        subscriber = Subscriber()
        dispatcher = LifecycleDispatcher().subscribe(subscriber)

        dispatcher.dispatch(HookPhase.BEFORE_EXECUTE, make_before_event())
        event = AfterExecuteEvent(FooCommand(), CommandInput(), BufferedOutput())
        dispatcher.dispatch(HookPhase.AFTER_EXECUTE, event)

        assert subscriber.seen == ["before", "after"]
        assert [r.priority for r in dispatcher.listeners(HookPhase.BEFORE_EXECUTE)] == [10]

    def test_dispatch_returns_event(self):
        dispatcher = LifecycleDispatcher()
        dispatcher.add_listener(HookPhase.BEFORE_EXECUTE, lambda e: e.disable_command())

        event = dispatcher.dispatch(HookPhase.BEFORE_EXECUTE, make_before_event())

        assert event.command_should_run is False


class TestEvents:
    """Test lifecycle event objects."""

    def test_before_event_can_be_disabled_and_enabled(self):
        event = make_before_event()
        assert event.command_should_run
        assert event.command_name == "foo:hello"

        event.disable_command()
        assert not event.command_should_run

        event.enable_command()
        assert event.command_should_run

    def test_after_event_success(self):
        event = AfterExecuteEvent(FooCommand(), CommandInput(), BufferedOutput())
        assert event.succeeded

        event.exit_code = ExitStatus.FAILURE
        assert not event.succeeded
