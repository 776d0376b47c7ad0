import numpy as np

from gridpath import PathPlanner, PathPlannerConfig


def test_planner_routes_around_blocked_tile():
    planner = PathPlanner(PathPlannerConfig())
    passable = [
        [True, False],
        [True, True],
    ]
    path = planner.plan(passable, start=(0, 0), goal=(1, 1))
    assert path == [(0, 0), (1, 0), (1, 1)]


def test_planner_diagonal_shortcut():
    planner = PathPlanner(PathPlannerConfig(allow_diagonal=True))
    passable = [[True] * 3 for _ in range(3)]
    assert planner.plan(passable, start=(0, 0), goal=(2, 2)) == [(0, 0), (1, 1), (2, 2)]


def test_planner_rejects_bad_endpoints():
    planner = PathPlanner()
    passable = [
        [True, False],
        [True, True],
    ]
    assert planner.plan(passable, start=(0, 0), goal=(0, 1)) == []
    assert planner.plan(passable, start=(0, 0), goal=(5, 5)) == []
    assert planner.plan([], start=(0, 0), goal=(0, 0)) == []


def test_planner_accepts_numpy_coordinates():
    mask = np.ones((3, 3), dtype=bool)
    start = tuple(np.argwhere(mask)[0])
    path = PathPlanner().plan(mask, start=start, goal=(np.int64(2), np.int64(2)))
    assert path[0] == (0, 0) and path[-1] == (2, 2)
    assert len(path) == 5
    assert all(type(axis) is int for cell in path for axis in cell)


def test_planner_rejects_mask_beyond_coordinate_range():
    planner = PathPlanner(PathPlannerConfig(max_coord=255))
    mask = np.ones((300, 2), dtype=bool)
    assert planner.plan(mask, start=(0, 0), goal=(0, 1)) == []
