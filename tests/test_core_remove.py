"""Tests for LinkedMap removal."""

import logging

import pytest

from linkedmap import LinkedMap, MissingKeyError, Node


def _abc() -> LinkedMap[str]:
    return LinkedMap[str]().add("a").add("b").add("c")


def test_remove_from_empty_map() -> None:
    """Test removing from an empty map returns it unchanged."""
    lm = LinkedMap[str]()
    assert lm.remove("foo") is lm


def test_remove_missing_value() -> None:
    """Test removing an absent value returns the same map."""
    lm = LinkedMap[str]().add("a")
    result = lm.remove("foo")

    assert result is lm
    assert result == lm


def test_remove_only_value() -> None:
    """Test removing the sole entry yields the empty map."""
    result = LinkedMap[str]().add("a").remove("a")

    assert result == LinkedMap()
    assert result.head is None
    assert result.tail is None
    assert dict(result.entries) == {}


def test_remove_first_of_two() -> None:
    """Test removing the head of a two-entry map."""
    result = LinkedMap[str]().add("a").add("b").remove("a")

    assert result.head == "b"
    assert result.tail == "b"
    assert dict(result.entries) == {"b": Node("b")}


def test_remove_last_of_two() -> None:
    """Test removing the tail of a two-entry map."""
    result = LinkedMap[str]().add("a").add("b").remove("b")

    assert result.head == "a"
    assert result.tail == "a"
    assert dict(result.entries) == {"a": Node("a")}


def test_remove_first_of_n() -> None:
    """Test removing the head of a longer map."""
    result = _abc().remove("a")

    assert result.head == "b"
    assert result.tail == "c"
    assert set(result.entries) == {"b", "c"}
    assert result.entries["b"] == Node("b", previous=None, next="c")
    assert result.entries["c"] == Node("c", previous="b", next=None)


def test_remove_last_of_n() -> None:
    """Test removing the tail of a longer map."""
    result = _abc().remove("c")

    assert result.head == "a"
    assert result.tail == "b"
    assert set(result.entries) == {"a", "b"}
    assert result.entries["a"] == Node("a", previous=None, next="b")
    assert result.entries["b"] == Node("b", previous="a", next=None)


def test_remove_from_middle() -> None:
    """Test splicing out an interior value."""
    result = _abc().remove("b")

    assert result.head == "a"
    assert result.tail == "c"
    assert "b" not in result.entries
    assert result.entries["a"] == Node("a", previous=None, next="c")
    assert result.entries["c"] == Node("c", previous="a", next=None)


def test_remove_does_not_mutate_receiver() -> None:
    """Test that remove leaves the original map intact."""
    original = _abc()
    original.remove("b")

    assert original.to_list() == ["a", "b", "c"]
    assert original.entries["a"].next == "b"


def test_remove_shares_untouched_nodes() -> None:
    """Test that only the neighbours of a removed value are rewritten."""
    original = LinkedMap.from_iterable(["a", "b", "c", "d", "e"])
    result = original.remove("c")

    assert result.entries["a"] is original.entries["a"]
    assert result.entries["e"] is original.entries["e"]
    assert result.entries["b"] is not original.entries["b"]
    assert result.entries["d"] is not original.entries["d"]


def test_remove_from_middle_of_long_map() -> None:
    """Test removing values from various positions in a longer map."""
    lm = LinkedMap.from_iterable(f"key{i}" for i in range(10))

    lm = lm.remove("key5").remove("key2").remove("key7")

    assert len(lm) == 7
    assert lm.to_list() == [f"key{i}" for i in (0, 1, 3, 4, 6, 8, 9)]
    assert list(reversed(lm)) == [f"key{i}" for i in (9, 8, 6, 4, 3, 1, 0)]


def test_remove_raise_with_existing_value() -> None:
    """Test strict remove behaves like remove when the value is present."""
    result = LinkedMap[str]().add("a").remove("a", if_missing="raise")

    assert dict(result.entries) == {}


def test_remove_raise_with_missing_value() -> None:
    """Test strict remove rejects an absent value."""
    lm = LinkedMap[str]().add("a")

    with pytest.raises(MissingKeyError, match="value 'b' is not present") as excinfo:
        lm.remove("b", if_missing="raise")

    assert excinfo.value.value == "b"


def test_remove_raise_logs_at_debug(caplog: pytest.LogCaptureFixture) -> None:
    """Test that a failed strict removal is logged at DEBUG."""
    with caplog.at_level(logging.DEBUG, logger="linkedmap.core"):
        with pytest.raises(MissingKeyError):
            LinkedMap[str]().remove("b", if_missing="raise")

    assert "missing" in caplog.text


def test_remove_invalid_policy() -> None:
    """Test that an unknown policy is rejected."""
    with pytest.raises(ValueError, match="Invalid if_missing policy"):
        LinkedMap[str]().remove("a", if_missing="skip")  # type: ignore[arg-type]


def test_interleaved_add_remove_operations() -> None:
    """Test interleaved adds, moves and removals keep the order consistent."""
    lm = LinkedMap.from_iterable(["k0", "k1", "k2"])

    lm = lm.remove("k1").add("k3").add("k0")
    assert lm.to_list() == ["k2", "k3", "k0"]

    lm = lm.remove("k0").remove("k2").add("k4")
    assert lm.to_list() == ["k3", "k4"]
    assert lm.head == "k3"
    assert lm.tail == "k4"
