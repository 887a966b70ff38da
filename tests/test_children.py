"""Tests for cloning and named child loggers"""

import io
import threading
from unittest.mock import Mock

import pytest

from dispatchlog import Level, Logger, LoggerConfig
from dispatchlog.core.child_registry import ChildRegistry, child_prefix


def make_logger():
    out = io.StringIO()
    return Logger(LoggerConfig(time_format=""), output=out), out


class TestClone:
    """Test Logger.clone."""

    def test_clone_copies_configuration(self):
        parent, _ = make_logger()
        parent.set_prefix("p: ")
        parent.set_level("debug")
        parent.set_time_format("%H")

        clone = parent.clone()

        assert clone is not parent
        assert clone.prefix == b"p: "
        assert clone.level == Level.DEBUG
        assert clone.time_format == "%H"
        assert clone.printer is parent.printer
        assert clone.formatter is parent.formatter

    def test_prefix_independent_after_clone(self):
        parent, _ = make_logger()
        parent.set_prefix("parent: ")
        clone = parent.clone()

        clone.set_prefix("clone: ")
        assert parent.prefix == b"parent: "

        parent.set_prefix("changed: ")
        assert clone.prefix == b"clone: "

    def test_fresh_lock_pool_and_children(self):
        parent, _ = make_logger()
        clone = parent.clone()
        assert clone._mu is not parent._mu
        assert clone._pool is not parent._pool
        assert clone.children is not parent.children

    def test_handlers_copied_at_clone_time(self):
        parent, _ = make_logger()
        before = Mock(return_value=False)
        parent.handle(before)
        clone = parent.clone()

        after = Mock(return_value=True)
        parent.handle(after)
        clone.info("from clone")

        before.assert_called_once()
        after.assert_not_called()
        assert clone.handlers == (before,)
        assert parent.handlers == (before, after)

    def test_clone_handler_not_seen_by_parent(self):
        parent, out = make_logger()
        clone = parent.clone()
        clone.handle(lambda log: True)

        parent.info("printed")
        clone.info("swallowed")

        assert out.getvalue() == "INFO printed\n"

    def test_clone_records_owned_by_clone(self):
        parent, out = make_logger()
        parent.set_prefix("parent: ")
        clone = parent.clone().set_prefix("clone: ")

        parent.info("a")
        clone.info("b")

        assert out.getvalue() == "parent: INFO a\nclone: INFO b\n"


class TestChildren:
    """Test Logger.child."""

    def test_child_prefix(self):
        parent, out = make_logger()
        db = parent.child("db")
        assert db.prefix == b"db: "

        db.info("connected")
        assert out.getvalue() == "db: INFO connected\n"

    def test_child_prefix_trailing_whitespace(self):
        parent, _ = make_logger()
        assert parent.child("[db] ").prefix == b"[db] "
        assert parent.child("tab\t").prefix == b"tab\t"

    def test_child_prefix_helper(self):
        assert child_prefix("api") == "api: "
        assert child_prefix("api ") == "api "

    def test_same_name_same_child(self):
        parent, _ = make_logger()
        assert parent.child("db") is parent.child("db")
        assert parent.child("db") is not parent.child("cache")

    def test_child_inherits_level(self):
        parent, out = make_logger()
        parent.set_level("error")
        child = parent.child("worker")
        child.info("hidden")
        child.error("shown")
        assert out.getvalue() == "worker: ERRO shown\n"

    def test_child_level_independent(self):
        parent, _ = make_logger()
        child = parent.child("worker")
        child.set_level("debug")
        assert parent.level == Level.INFO

    def test_child_registry_is_per_parent(self):
        parent, _ = make_logger()
        child = parent.child("a")
        grandchild = child.child("b")
        assert grandchild.prefix == b"b: "
        assert "b" not in parent.children
        assert "b" in child.children

    def test_empty_name_rejected(self):
        parent, _ = make_logger()
        with pytest.raises(ValueError):
            parent.child("")

    def test_concurrent_first_requests_converge(self):
        parent, _ = make_logger()
        results = []
        lock = threading.Lock()
        barrier = threading.Barrier(16)

        def worker():
            barrier.wait()
            child = parent.child("db")
            with lock:
                results.append(child)

        threads = [threading.Thread(target=worker) for _ in range(16)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(results) == 16
        assert all(child is results[0] for child in results)
        assert results[0].prefix == b"db: "
        assert len(parent.children) == 1


class TestChildRegistry:
    """Test ChildRegistry directly."""

    def test_get_or_add(self):
        parent, _ = make_logger()
        registry = ChildRegistry()

        assert registry.get("x") is None
        child = registry.get_or_add("x", parent)

        assert registry.get("x") is child
        assert registry.names() == ["x"]
        assert len(registry) == 1
