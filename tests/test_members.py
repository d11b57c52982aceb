"""Test member table lookups through the lineage."""

import abitbol


def make_tables():
    root = abitbol.MemberTable()
    root.own.update(a="root-a", b="root-b")
    child = abitbol.MemberTable(root)
    child.own.update(b="child-b", c="child-c")
    return root, child


def test_lookup_fallthrough():
    """Test lookups fall through to the parent table."""
    root, child = make_tables()

    assert child["a"] == "root-a"
    assert child["b"] == "child-b"
    assert child["c"] == "child-c"
    assert root["b"] == "root-b"


def test_lookup_owner():
    """Test lookup reports the table that defines the member."""
    root, child = make_tables()

    assert child.lookup("a") == (root, "root-a")
    assert child.lookup("b") == (child, "child-b")
    assert child.lookup("z") is None


def test_lookup_none_value():
    """Test a member explicitly set to None still counts as defined."""
    root, child = make_tables()
    child.own["a"] = None

    assert "a" in child
    assert child.lookup("a") == (child, None)
    assert child.get("a", "default") is None


def test_missing():
    """Test misses raise KeyError or return the default."""
    root, child = make_tables()

    assert "z" not in child
    assert child.get("z") is None
    assert child.get("z", 5) == 5
    try:
        child["z"]
    except KeyError:
        pass
    else:
        raise AssertionError("missing member should raise")


def test_iteration():
    """Test iteration yields every name once, nearest first."""
    root, child = make_tables()

    assert list(child) == ["b", "c", "a"]
    assert len(child) == 3
    assert list(root) == ["a", "b"]
    assert list(child.chain()) == [child, root]


def test_class_tables_linked():
    """Test class member tables fall through to the parent class."""
    Cls1 = abitbol.Object.extend({"a": 1})
    Cls2 = Cls1.extend({"b": 2})

    assert Cls2.members.parent is Cls1.members
    assert Cls1.members.parent is abitbol.Object.members
    assert dict(Cls2.members.own) == {"b": 2}
    assert Cls2.members["a"] == 1
