import pytest

from ginkgokit.blackboard import Blackboard


def test_round_trip_int():
    board = Blackboard()
    board.set_value("health", 42)
    assert board.get_value("health", int) == 42


def test_round_trip_string_and_float():
    board = Blackboard()
    board.set_value("name", "guard")
    board.set_value("speed", 2.5)
    assert board.get_value("name", str) == "guard"
    assert board.get_value("speed", float) == 2.5


def test_overwrite_replaces_value_and_type():
    board = Blackboard()
    board.set_value("target", 1)
    board.set_value("target", "player")
    assert board.get_value("target", str) == "player"
    with pytest.raises(TypeError):
        board.get_value("target", int)


def test_missing_key_raises_key_error():
    board = Blackboard()
    with pytest.raises(KeyError):
        board.get_value("absent", int)


def test_wrong_type_raises_type_error():
    board = Blackboard()
    board.set_value("count", 3)
    with pytest.raises(TypeError):
        board.get_value("count", float)


def test_type_match_is_exact_for_bool():
    board = Blackboard()
    board.set_value("alert", True)
    with pytest.raises(TypeError):
        board.get_value("alert", int)
    assert board.get_value("alert", bool) is True


def test_stored_value_is_a_copy():
    board = Blackboard()
    waypoints = [[0, 0], [1, 2]]
    board.set_value("path", waypoints)
    waypoints[1].append(9)
    waypoints.append([5, 5])
    assert board.get_value("path", list) == [[0, 0], [1, 2]]


def test_returned_value_is_a_copy():
    board = Blackboard()
    board.set_value("items", ["sword"])
    first = board.get_value("items", list)
    first.append("shield")
    assert board.get_value("items", list) == ["sword"]


def test_contains():
    board = Blackboard()
    assert "key" not in board
    board.set_value("key", 0)
    assert "key" in board


def test_uncopyable_value_raises_type_error():
    import threading

    board = Blackboard()
    with pytest.raises(TypeError):
        board.set_value("lock", threading.Lock())
    assert "lock" not in board