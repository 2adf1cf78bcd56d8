"""Tests for the hook bus and the hooks loggers publish"""

import pytest

from scoped_logger import (
    BaseLogger,
    DevNullLogger,
    HookBus,
    HookEvent,
    HookKind,
    LoggerConfig,
    LogLevel,
    MemoryLogger,
    ScopeNotOnTopError,
)


def recorder(bus, *kinds):
    events = []
    bus.subscribe(events.append, *kinds)
    return events


class TestHookBus:
    """Test subscribe/publish behavior."""

    def test_subscribe_all_kinds(self):
        bus = HookBus()
        events = recorder(bus)
        for kind in HookKind:
            bus.publish(HookEvent(kind, None))
        assert [e.kind for e in events] == list(HookKind)

    def test_subscribe_selected_kinds(self):
        bus = HookBus()
        events = recorder(bus, HookKind.SCOPE_BEGIN, HookKind.SCOPE_END)
        bus.publish(HookEvent(HookKind.BEFORE_EMIT, None))
        bus.publish(HookEvent(HookKind.SCOPE_END, None))
        assert [e.kind for e in events] == [HookKind.SCOPE_END]

    def test_subscription_order(self):
        bus = HookBus()
        calls = []
        bus.subscribe(lambda e: calls.append("first"))
        bus.subscribe(lambda e: calls.append("second"))
        bus.publish(HookEvent(HookKind.AFTER_EMIT, None))
        assert calls == ["first", "second"]

    def test_unsubscribe_function(self):
        bus = HookBus()
        events = []
        unsubscribe = bus.subscribe(events.append)
        unsubscribe()
        unsubscribe()
        bus.publish(HookEvent(HookKind.AFTER_EMIT, None))
        assert events == []
        assert len(bus) == 0

    def test_unsubscribe_same_object(self):
        bus = HookBus()

        def callback(event):
            pass

        bus.subscribe(callback, HookKind.BEFORE_EMIT)
        bus.subscribe(callback, HookKind.AFTER_EMIT)
        assert bus.unsubscribe(callback) is True
        assert len(bus) == 0
        assert bus.unsubscribe(callback) is False

    def test_unsubscribe_during_publish(self):
        bus = HookBus()
        calls = []

        def once(event):
            calls.append("once")
            unsubscribe()

        unsubscribe = bus.subscribe(once)
        bus.subscribe(lambda e: calls.append("always"))
        bus.publish(HookEvent(HookKind.AFTER_EMIT, None))
        bus.publish(HookEvent(HookKind.AFTER_EMIT, None))
        assert calls == ["once", "always", "always"]

    def test_callback_must_be_callable(self):
        with pytest.raises(TypeError):
            HookBus().subscribe("nope")

    def test_subscriber_errors_propagate(self):
        bus = HookBus()

        def broken(event):
            raise RuntimeError("subscriber failed")

        bus.subscribe(broken)
        with pytest.raises(RuntimeError):
            bus.publish(HookEvent(HookKind.AFTER_EMIT, None))

    def test_clear(self):
        bus = HookBus()
        bus.subscribe(print)
        bus.clear()
        assert len(bus) == 0
        assert repr(bus) == "HookBus(subscribers=0)"


class TestLoggerHooks:
    """Test the hooks published by sink loggers."""

    def test_enabled_emit_sequence(self, plain_config):
        logger = MemoryLogger("hooks", config=plain_config)
        events = recorder(logger.hooks)

        error = ValueError("x")
        logger.emit(LogLevel.WARN, 5, "state", error)

        assert [e.kind for e in events] == [
            HookKind.BEFORE_EMIT,
            HookKind.MESSAGE_EMITTED,
            HookKind.AFTER_EMIT,
        ]
        before, emitted, after = events
        assert before.params == (LogLevel.WARN, 5, "state", error, None)
        assert emitted.params == ("[hooks] [E:5]: state, [ValueError]: x",)
        assert all(e.logger is logger for e in events)
        assert all(e.level == LogLevel.WARN for e in events)

    def test_gated_emit_sequence(self):
        logger = DevNullLogger("hooks", LoggerConfig(level=LogLevel.ERROR))
        events = recorder(logger.hooks)
        logger.info("quiet")
        assert [e.kind for e in events] == [HookKind.BEFORE_EMIT, HookKind.AFTER_EMIT]

    def test_write_failure_still_publishes_after(self):
        class FailingLogger(MemoryLogger):
            def write(self, message):
                raise OSError("disk full")

        logger = FailingLogger("hooks")
        events = recorder(logger.hooks)
        with pytest.raises(OSError):
            logger.info("x")
        assert [e.kind for e in events] == [HookKind.BEFORE_EMIT, HookKind.AFTER_EMIT]
        assert logger.num_messages_logged == 0

    def test_message_emitted_runs_after_write(self):
        logger = MemoryLogger("hooks")
        seen = []
        logger.hooks.subscribe(
            lambda e: seen.append(logger.num_messages), HookKind.MESSAGE_EMITTED
        )
        logger.info("x")
        assert seen == [1]

    def test_scope_hooks(self):
        logger = DevNullLogger("hooks")
        events = recorder(logger.hooks, HookKind.SCOPE_BEGIN, HookKind.SCOPE_END)
        with logger.scope("unit") as scope:
            pass
        assert [(e.kind, e.scope) for e in events] == [
            (HookKind.SCOPE_BEGIN, scope),
            (HookKind.SCOPE_END, scope),
        ]

    def test_failed_end_scope_publishes_nothing(self):
        logger = DevNullLogger("hooks")
        a = logger.begin_scope("a")
        b = logger.begin_scope("b")
        events = recorder(logger.hooks)
        with pytest.raises(ScopeNotOnTopError):
            logger.end_scope(a)
        assert events == []
        logger.end_scope(b)
        logger.end_scope(a)

    def test_scope_hooks_on_base_logger(self):
        logger = BaseLogger("base")
        events = recorder(logger.hooks)
        logger.with_scope("x", lambda scope, log: None)
        assert [e.kind for e in events] == [HookKind.SCOPE_BEGIN, HookKind.SCOPE_END]

    def test_hook_failure_in_before_emit_propagates(self):
        logger = MemoryLogger("hooks")

        def broken(event):
            raise RuntimeError("hook failed")

        logger.hooks.subscribe(broken, HookKind.BEFORE_EMIT)
        with pytest.raises(RuntimeError):
            logger.info("x")
        assert logger.num_messages == 0
