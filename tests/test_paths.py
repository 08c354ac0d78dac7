"""Tests for Item, SubPath, RemotePath and the path resolver."""

from __future__ import annotations

import pytest

from nodecache.resolver import physical_path, relative_path
from nodecache.types import Item, RemotePath, SubPath


class FakeChannel:
    """Minimal stand-in for a channel; only the name is used."""

    def __init__(self, name: str) -> None:
        self.name = name


# ---------------------------------------------------------------------------
# Item
# ---------------------------------------------------------------------------


class TestItem:
    def test_from_root_dir(self):
        item = Item.from_root_dir("/var/ci/jobs/proj")
        assert item == Item(container="jobs", name="proj")

    def test_full_name(self):
        assert Item("jobs", "proj").full_name == "jobs/proj"

    def test_frozen(self):
        item = Item("jobs", "proj")
        with pytest.raises(AttributeError):
            item.name = "other"  # type: ignore[misc]


# ---------------------------------------------------------------------------
# SubPath
# ---------------------------------------------------------------------------


class TestSubPath:
    def test_parse(self):
        assert SubPath.parse("cache/deps").segments == ("cache", "deps")

    def test_parse_none_and_empty(self):
        assert SubPath.parse(None) == SubPath()
        assert SubPath.parse("") == SubPath()

    def test_child_returns_new_value(self):
        base = SubPath.parse("cache")
        child = base.child("deps")
        assert base.segments == ("cache",)
        assert child.segments == ("cache", "deps")

    def test_child_with_separator(self):
        assert SubPath().child("a/b") == SubPath(("a", "b"))

    def test_child_chain_matches_direct(self):
        assert SubPath().child("a").child("b") == SubPath.parse("a/b")

    def test_dotdot_does_not_escape(self):
        assert SubPath().child("..").child("x") == SubPath(("x",))

    def test_str(self):
        assert str(SubPath.parse("a/b")) == "a/b"


# ---------------------------------------------------------------------------
# Resolver
# ---------------------------------------------------------------------------


class TestRelativePath:
    def test_scenario(self):
        item = Item(container="jobs", name="proj")
        assert relative_path(item, SubPath(("cache", "deps"))) == "jobs/proj/cache/deps"

    def test_string_sub_path(self):
        assert relative_path(Item("jobs", "proj"), "cache/deps") == "jobs/proj/cache/deps"

    def test_root(self):
        assert relative_path(Item("jobs", "proj")) == "jobs/proj"

    def test_deterministic(self):
        item = Item("jobs", "proj")
        sub = SubPath.parse("x/y")
        assert relative_path(item, sub) == relative_path(item, sub)


class TestPhysicalPath:
    def test_same_relative_path_on_every_home(self):
        item = Item("jobs", "proj")
        a = physical_path("/home/a", item, "cache")
        b = physical_path("/srv/b/", item, "cache")
        assert a == "/home/a/jobs/proj/cache"
        assert b == "/srv/b/jobs/proj/cache"
        assert a.removeprefix("/home/a/") == b.removeprefix("/srv/b/")


class TestRemotePath:
    def test_child(self):
        loc = RemotePath(FakeChannel("n1"), "/ws")
        assert loc.child("out").path == "/ws/out"

    def test_str(self):
        assert str(RemotePath(FakeChannel("n1"), "/ws")) == "n1:/ws"
