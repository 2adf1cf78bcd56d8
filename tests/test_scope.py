"""Tests for scopes and the scope registry"""

import asyncio

import pytest

from scoped_logger import (
    DevNullLogger,
    LoggerConfig,
    MemoryLogger,
    Scope,
    ScopeError,
    ScopeNotKnownError,
    ScopeNotOnTopError,
    ScopeRegistry,
)
from scoped_logger.core.scope import source_name


class Worker:
    pass


class TestSourceName:
    """Test naming of source identities."""

    def test_string(self):
        assert source_name("jobs") == "jobs"
        assert source_name("") == ""

    def test_class_and_function(self):
        assert source_name(Worker) == "Worker"
        assert source_name(source_name) == "source_name"

    @pytest.mark.parametrize("source", [1, None, Worker(), ("a",)])
    def test_unnameable(self, source):
        with pytest.raises(TypeError):
            source_name(source)


class TestScope:
    """Test scope markers."""

    def test_value_and_logger(self):
        logger = DevNullLogger("s")
        scope = Scope("req", logger)
        assert scope.value == "req"
        assert scope.logger is logger

    def test_immutable(self):
        scope = Scope("req", DevNullLogger("s"))
        with pytest.raises(AttributeError):
            scope.value = "other"
        with pytest.raises(AttributeError):
            scope.extra = 1

    def test_logger_is_weak(self):
        logger = DevNullLogger("s")
        scope = Scope("req", logger)
        del logger
        assert scope.logger is None

    def test_str(self):
        logger = DevNullLogger("s")
        assert str(Scope("req", logger)) == "req"
        assert str(Scope(42, logger)) == "42"
        assert str(Scope({"id": 1}, logger)) == "{'id': 1}"

    def test_repr(self):
        assert repr(Scope("req", DevNullLogger("s"))) == "Scope('req')"


class TestScopeRegistry:
    """Test per-source LIFO stacks."""

    def test_default_is_shared(self):
        assert ScopeRegistry.default() is ScopeRegistry.default()

    def test_push_and_pop(self):
        registry = ScopeRegistry()
        logger = DevNullLogger("s")
        a, b = Scope("a", logger), Scope("b", logger)

        registry.push("s", a)
        registry.push("s", b)
        assert registry.stack("s") == (a, b)
        assert registry.depth("s") == 2

        assert registry.pop("s", b) is b
        assert registry.pop("s", a) is a
        assert registry.depth("s") == 0
        assert registry.has_stack("s")

    def test_pop_unknown_source(self):
        registry = ScopeRegistry()
        with pytest.raises(ScopeNotKnownError) as exc_info:
            registry.pop("nowhere", Scope("a", DevNullLogger("s")))
        assert exc_info.value.source_name == "nowhere"
        assert "not internally known" in str(exc_info.value)

    def test_pop_not_on_top_leaves_stack(self):
        registry = ScopeRegistry()
        logger = DevNullLogger("s")
        a, b = Scope("a", logger), Scope("b", logger)
        registry.push("s", a)
        registry.push("s", b)

        with pytest.raises(ScopeNotOnTopError) as exc_info:
            registry.pop("s", a)
        assert exc_info.value.depth == 2
        assert registry.stack("s") == (a, b)

    def test_pop_from_empty_stack(self):
        registry = ScopeRegistry()
        logger = DevNullLogger("s")
        a = Scope("a", logger)
        registry.push("s", a)
        registry.pop("s", a)

        with pytest.raises(ScopeNotOnTopError):
            registry.pop("s", a)

    def test_equal_values_are_not_interchangeable(self):
        registry = ScopeRegistry()
        logger = DevNullLogger("s")
        a, twin = Scope("a", logger), Scope("a", logger)
        registry.push("s", a)
        with pytest.raises(ScopeNotOnTopError):
            registry.pop("s", twin)

    def test_stack_is_snapshot(self):
        registry = ScopeRegistry()
        assert registry.stack("s") == ()
        registry.push("s", Scope("a", DevNullLogger("s")))
        snapshot = registry.stack("s")
        registry.push("s", Scope("b", DevNullLogger("s")))
        assert len(snapshot) == 1

    def test_clear(self):
        registry = ScopeRegistry()
        logger = DevNullLogger("s")
        registry.push("a", Scope(1, logger))
        registry.push("b", Scope(2, logger))
        registry.clear("a")
        assert not registry.has_stack("a")
        assert registry.has_stack("b")
        registry.clear()
        assert len(registry) == 0

    def test_errors_share_base(self):
        assert issubclass(ScopeNotKnownError, ScopeError)
        assert issubclass(ScopeNotOnTopError, ScopeError)


class TestLoggerScopes:
    """Test scopes through the logger API."""

    def test_begin_and_end(self, plain_config):
        logger = MemoryLogger(Worker, config=plain_config)
        outer = logger.begin_scope("outer")
        inner = logger.begin_scope(7)
        assert logger.scope_string == "[outer][7]"

        logger.info("nested")
        logger.end_scope(inner)
        logger.info("outer only")
        logger.end_scope(outer)
        logger.info("none")

        texts = [str(m) for m in logger.messages_list()]
        assert texts == [
            "[Worker]: none",
            "[Worker] [outer]: outer only",
            "[Worker] [outer][7]: nested",
        ]

    def test_end_scope_returns_self(self):
        logger = DevNullLogger("s")
        assert logger.end_scope(logger.begin_scope()) is logger

    def test_out_of_order_end_leaves_both(self):
        logger = DevNullLogger("s")
        a = logger.begin_scope("A")
        b = logger.begin_scope("B")

        with pytest.raises(ScopeNotOnTopError):
            logger.end_scope(a)
        assert logger.scope_string == "[A][B]"

        logger.end_scope(b)
        logger.end_scope(a)
        assert logger.scope_string == ""

    def test_end_on_other_source(self):
        logger = DevNullLogger("one")
        other = DevNullLogger("two")
        scope = logger.begin_scope("x")
        with pytest.raises(ScopeNotKnownError):
            other.end_scope(scope)

    def test_empty_scope_renders_brackets(self):
        logger = DevNullLogger("s")
        with logger.scope():
            assert logger.scope_string == "[]"

    def test_loggers_of_same_source_share_stack(self, plain_config):
        first = MemoryLogger(Worker, config=plain_config)
        second = MemoryLogger(Worker, config=plain_config)
        with first.scope("job"):
            second.info("seen")
        assert str(second.messages_list()[0]) == "[Worker] [job]: seen"

    def test_context_manager_ends_on_error(self):
        logger = DevNullLogger("s")
        with pytest.raises(RuntimeError):
            with logger.scope("boom"):
                raise RuntimeError("fail")
        assert logger.scope_string == ""

    def test_with_scope(self):
        logger = DevNullLogger("s")
        seen = []

        def body(scope, log):
            seen.append((scope.value, log.scope_string))
            return 99

        assert logger.with_scope("unit", body) == 99
        assert seen == [("unit", "[unit]")]
        assert logger.scope_string == ""

    def test_with_scope_ends_on_error(self):
        logger = DevNullLogger("s")

        def body(scope, log):
            raise ValueError("body failed")

        with pytest.raises(ValueError):
            logger.with_scope("unit", body)
        assert logger.scope_string == ""

    def test_with_scope_async(self):
        logger = DevNullLogger("s")

        async def body(scope, log):
            await asyncio.sleep(0)
            return log.scope_string

        assert asyncio.run(logger.with_scope_async("async", body)) == "[async]"
        assert logger.scope_string == ""

    def test_with_scope_async_ends_on_error(self):
        logger = DevNullLogger("s")

        async def body(scope, log):
            await asyncio.sleep(0)
            raise KeyError("missing")

        with pytest.raises(KeyError):
            asyncio.run(logger.with_scope_async("async", body))
        assert logger.scope_string == ""

    def test_isolated_scopes(self):
        isolated = DevNullLogger("s", LoggerConfig(isolated_scopes=True))
        shared = DevNullLogger("s")

        with isolated.scope("private"):
            assert isolated.scope_string == "[private]"
            assert shared.scope_string == ""

        assert isolated.scope_registry is not ScopeRegistry.default()

    def test_replace_registry(self):
        logger = DevNullLogger("s")
        registry = ScopeRegistry()
        logger.scope_registry = registry
        with logger.scope("x"):
            assert registry.depth("s") == 1
            assert ScopeRegistry.default().depth("s") == 0

        with pytest.raises(TypeError):
            logger.scope_registry = {}
