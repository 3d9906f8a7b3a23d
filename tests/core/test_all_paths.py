"""
Tests for simple path enumeration.
"""

from typing import List

import pytest

from wayfinder.core.search.algorithms.all_paths import DEFAULT_MAX_PATH_LENGTH, AllPathsFinder
from wayfinder.core.search.models import PathResult


def test_all_paths_basic(weighted_successors):
    """Test that every simple path is produced in successor order."""
    finder = AllPathsFinder(weighted_successors)
    paths: List[PathResult] = list(finder.find_paths("A", lambda n: n == "E"))

    assert [p.path for p in paths] == [["A", "B", "C", "E"], ["A", "D", "E"]]
    assert [p.total_cost for p in paths] == [3.0, 5.0]


def test_all_paths_skips_cycles(weighted_successors):
    """Test that no path repeats a node."""
    finder = AllPathsFinder(weighted_successors)

    for result in finder.find_paths("A", lambda n: n == "E"):
        assert len(set(result.path)) == len(result.path)


def test_all_paths_stops_at_first_goal_node():
    """Test that a path is not extended past a node satisfying the goal."""
    adjacency = {"S": [("G1", 1.0)], "G1": [("G2", 1.0)], "G2": []}
    finder = AllPathsFinder(lambda n: adjacency[n])

    paths = list(finder.find_paths("S", lambda n: n.startswith("G")))
    assert [p.path for p in paths] == [["S", "G1"]]


def test_all_paths_start_is_goal(weighted_successors):
    """Test the single node path."""
    finder = AllPathsFinder(weighted_successors)

    paths = list(finder.find_paths("A", lambda n: n == "A"))
    assert len(paths) == 1
    assert paths[0].path == ["A"]
    assert paths[0].total_cost == 0.0


def test_all_paths_max_length(weighted_successors):
    """Test max_length constraint in path finding."""
    finder = AllPathsFinder(weighted_successors)

    short_paths = list(finder.find_paths("A", lambda n: n == "E", max_length=2))
    assert [p.path for p in short_paths] == [["A", "D", "E"]]


def test_all_paths_max_paths_limit(weighted_successors):
    """Test max_paths limit in all_paths."""
    finder = AllPathsFinder(weighted_successors)

    paths = list(finder.find_paths("A", lambda n: n == "E", max_paths=1))
    assert len(paths) == 1

    with pytest.raises(ValueError, match="max_paths must be positive"):
        next(finder.find_paths("A", lambda n: n == "E", max_paths=0))


def test_all_paths_invalid_max_length(weighted_successors):
    """Test handling of invalid max_length values."""
    finder = AllPathsFinder(weighted_successors)

    with pytest.raises(ValueError, match="max_length must be positive"):
        next(finder.find_paths("A", lambda n: n == "E", max_length=0))


def test_all_paths_default_max_length_bounds_infinite_space():
    """Test that the default length bound stops enumeration of an endless chain."""
    finder = AllPathsFinder(lambda n: [(n + 1, 1.0)])

    assert list(finder.find_paths(0, lambda n: False)) == []
    paths = list(finder.find_paths(0, lambda n: n == DEFAULT_MAX_PATH_LENGTH))
    assert len(paths) == 1
    assert len(paths[0]) == DEFAULT_MAX_PATH_LENGTH


def test_find_path_returns_first_path(weighted_successors):
    """Test the single path form."""
    finder = AllPathsFinder(weighted_successors)

    assert finder.find_path("A", lambda n: n == "E").path == ["A", "B", "C", "E"]
    assert finder.find_path("A", lambda n: n == "F") is None
