from gridpath.search import bfs, path_cost, reconstruct_path, shortest_path


def _graph(edges):
    adj = {}
    for u, v in edges:
        adj.setdefault(u, []).append(v)
        adj.setdefault(v, [])
    return lambda u: adj.get(u, [])


def test_start_equals_end_returns_single_vertex():
    assert shortest_path("a", "a", lambda u: ["b", "c"]) == ["a"]
    assert bfs("a", "a", lambda u: ["b"]) == {"a": None}


def test_shortest_path_is_edge_minimal():
    # Long way round a->b->c->d->e, shortcut a->x->e.
    neighbors = _graph([("a", "b"), ("b", "c"), ("c", "d"), ("d", "e"), ("a", "x"), ("x", "e")])
    path = shortest_path("a", "e", neighbors)
    assert path == ["a", "x", "e"]
    assert path_cost(path) == 2


def test_unreachable_end_gives_empty_path():
    neighbors = _graph([(1, 2), (2, 3), (4, 5)])
    parents = bfs(1, 5, neighbors)
    assert 5 not in parents
    assert set(parents) == {1, 2, 3}
    assert shortest_path(1, 5, neighbors) == []
    assert path_cost([]) == -1


def test_self_loops_are_ignored():
    neighbors = _graph([(0, 0), (0, 1), (1, 1), (1, 2)])
    assert shortest_path(0, 2, neighbors) == [0, 1, 2]


def test_first_discovery_wins_in_neighbor_order():
    neighbors = _graph([("s", "l"), ("s", "r"), ("l", "t"), ("r", "t")])
    parents = bfs("s", "t", neighbors)
    assert parents["t"] == "l"


def test_search_stops_once_end_is_discovered():
    expanded = []

    def neighbors(u):
        expanded.append(u)
        return [u + 1]

    parents = bfs(0, 3, neighbors)
    assert expanded == [0, 1, 2]
    assert max(parents) == 3


def test_parents_point_to_earlier_rounds():
    neighbors = _graph([(0, 1), (0, 2), (1, 3), (2, 3), (3, 4), (4, 0)])
    parents = bfs(0, 99, neighbors)
    depth = {0: 0}
    for v in [1, 2, 3, 4]:
        depth[v] = depth[parents[v]] + 1
    assert depth == {0: 0, 1: 1, 2: 1, 3: 2, 4: 3}


def test_reconstruct_from_shared_parent_map():
    neighbors = _graph([("a", "b"), ("b", "c"), ("a", "d")])
    parents = bfs("a", None, neighbors)
    assert reconstruct_path(parents, "c") == ["a", "b", "c"]
    assert reconstruct_path(parents, "d") == ["a", "d"]
    assert reconstruct_path(parents, "zzz") == []


def test_repeated_calls_are_deterministic():
    neighbors = _graph([(0, 1), (0, 2), (1, 3), (2, 3), (3, 4)])
    assert shortest_path(0, 4, neighbors) == shortest_path(0, 4, neighbors)


def test_bfs_logs_search_summary(caplog):
    neighbors = _graph([(0, 1)])
    with caplog.at_level("DEBUG", logger="gridpath.search.bfs"):
        bfs(0, 1, neighbors)
    assert "reached=True" in caplog.text


def test_none_can_be_an_intermediate_vertex():
    neighbors = _graph([("a", None), (None, "c")])
    assert shortest_path("a", "c", neighbors) == ["a", None, "c"]
