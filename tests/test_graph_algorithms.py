import math

from algorithms import astar
from algorithms.bellman_ford import generate_bellman_ford_steps
from algorithms.bfs import generate_bfs_steps
from algorithms.dfs import generate_dfs_steps
from algorithms.dijkstra import generate_dijkstra_steps, reconstruct_path
from algorithms.kruskal import generate_kruskal_steps
from algorithms.prim import generate_prim_steps
from algorithms.topological_sort import generate_topological_sort_steps
from graph import EdgeState, Graph, NodeState, samples


def _square() -> Graph:
    return Graph.from_edge_list(
        ["A", "B", "C", "D"],
        [("A", "B", 1), ("B", "C", 2), ("A", "C", 3), ("C", "D", 4)],
    )


# ---------------------------------------------------------------------------
# Graph container
# ---------------------------------------------------------------------------
def test_graph_round_trip_and_adjacency():
    g = samples.traversal_graph()
    copy = Graph.from_dict(g.to_dict())
    assert copy.node_ids() == g.node_ids()
    assert [n for n, _ in copy.neighbours("A")] == ["B", "C"]
    assert copy.get_edge_between("B", "A") is not None


def test_random_graph_is_connected_and_seeded():
    a = Graph.generate_random(num_nodes=7, seed=3)
    b = Graph.generate_random(num_nodes=7, seed=3)
    assert a.to_dict() == b.to_dict()
    steps = generate_bfs_steps(a, "A")
    assert len(steps[-1].snapshot.data.order) == 7


# ---------------------------------------------------------------------------
# MST
# ---------------------------------------------------------------------------
def test_kruskal_square_total_and_reject():
    steps = generate_kruskal_steps(_square())
    run = steps[-1].snapshot.data

    assert run.mst_weight == 7
    assert run.mst_edges == ["A-B", "B-C", "C-D"]
    assert "Rejected: A and C are already connected (would create cycle)" in [s.description for s in steps]
    assert steps[-1].description == "Kruskal's complete! MST has 3 edges with total weight 7"


def test_kruskal_four_nodes_total_six():
    g = Graph.from_edge_list(
        ["A", "B", "C", "D"],
        [("A", "B", 1), ("B", "C", 2), ("C", "D", 3), ("D", "A", 4), ("A", "C", 5)],
    )
    run = generate_kruskal_steps(g)[-1].snapshot.data
    assert run.mst_weight == 6
    assert len(run.mst_edges) == 3
    assert "A-C" not in run.mst_edges
    assert "D-A" not in run.mst_edges


def test_kruskal_triangle_total_three():
    g = Graph.from_edge_list(["A", "B", "C"], [("A", "B", 1), ("B", "C", 2), ("A", "C", 3)])
    steps = generate_kruskal_steps(g)
    assert steps[-1].snapshot.data.mst_weight == 3
    assert steps[1].description == "Sorted 3 edges by weight: [1, 2, 3]"


def test_kruskal_and_prim_agree_on_sample():
    k = generate_kruskal_steps(samples.mst_graph())[-1].snapshot.data
    p = generate_prim_steps(samples.mst_graph(), "A")[-1].snapshot.data
    assert k.mst_weight == p.mst_weight == 14
    assert all(n.state == NodeState.IN_MST for n in p.graph.nodes.values())


def test_prim_skips_edges_inside_tree():
    steps = generate_prim_steps(_square(), "A")
    assert steps[0].description == "Prim's MST starting from node A"
    assert steps[-1].description == "Prim's complete! MST has 3 edges with total weight 7"


def test_graph_input_is_not_modified():
    g = samples.mst_graph()
    generate_kruskal_steps(g)
    assert all(e.state == EdgeState.DEFAULT for e in g.edges.values())


# ---------------------------------------------------------------------------
# Shortest paths
# ---------------------------------------------------------------------------
def test_dijkstra_distances():
    steps = generate_dijkstra_steps(samples.shortest_path_graph(), "A")
    run = steps[-1].snapshot.data

    assert run.distances == {"A": 0, "B": 3, "C": 2, "D": 8, "E": 10, "F": 13, "G": 14}
    assert steps[-1].description == \
        "Dijkstra complete. Shortest distances: A:0, B:3, C:2, D:8, E:10, F:13, G:14"
    prev = steps[-1].snapshot.metadata["predecessors"]
    assert reconstruct_path(prev, "G") == ["A", "C", "B", "D", "E", "F", "G"]


def test_dijkstra_shows_infinity_for_unreachable():
    g = Graph.from_edge_list(["A", "B", "C"], [("A", "B", 1)])
    steps = generate_dijkstra_steps(g, "A")
    assert steps[1].description == "Initialized distances: A:0, B:∞, C:∞"
    assert math.isinf(steps[-1].snapshot.data.distances["C"])


def test_bellman_ford_negative_weights():
    steps = generate_bellman_ford_steps(samples.negative_weight_graph(), "A")
    run = steps[-1].snapshot.data

    assert run.distances == {"A": 0, "B": 2, "C": 7, "D": 4, "E": -2}
    assert steps[-1].description == "Complete! Shortest distances: A:0, B:2, C:7, D:4, E:-2"
    assert steps[-1].snapshot.metadata["negative_cycle"] is False


def test_bellman_ford_detects_negative_cycle():
    g = Graph.from_edge_list(
        ["A", "B", "C"],
        [("A", "B", 1), ("B", "C", -2), ("C", "B", 1)],
        directed=True,
    )
    steps = generate_bellman_ford_steps(g, "A")
    assert steps[-1].description.startswith("Negative cycle detected at edge")
    assert steps[-1].snapshot.metadata["negative_cycle"] is True


def test_bellman_ford_stops_early():
    g = Graph.from_edge_list(["A", "B", "C", "D"], [("A", "B", 1)], directed=True)
    steps = generate_bellman_ford_steps(g, "A")
    descriptions = [s.description for s in steps]
    assert "No updates in iteration 2. Algorithm can terminate early." in descriptions
    assert "Iteration 3 of 3" not in descriptions


# ---------------------------------------------------------------------------
# Ordering and traversal
# ---------------------------------------------------------------------------
def test_topological_sort_order():
    steps = generate_topological_sort_steps(samples.dag())
    assert steps[-1].description == "Topological Sort complete! Order: [A → B → C → D → E → F]"
    assert steps[-1].snapshot.metadata["has_cycle"] is False


def test_topological_sort_reports_cycle():
    g = Graph.from_edge_list(["A", "B", "C"], [("A", "B", 1), ("B", "C", 1), ("C", "B", 1)],
                             directed=True)
    steps = generate_topological_sort_steps(g)
    assert steps[-1].description == "Error: Graph contains a cycle! Topological sort not possible."
    assert steps[-1].snapshot.metadata["has_cycle"] is True


def test_bfs_order_and_path():
    steps = generate_bfs_steps(samples.traversal_graph(), "A")
    assert steps[-1].description == "BFS complete! Visit order: [A, B, C, D, E, F, G]"

    steps = generate_bfs_steps(samples.traversal_graph(), "A", "G")
    assert steps[-1].description == "Reached G! Path: A → C → F → G (3 edge(s))"


def test_dfs_order():
    steps = generate_dfs_steps(samples.traversal_graph(), "A")
    assert steps[-1].description == "DFS complete! Visit order: [A, B, D, E, F, C, G]"


def test_unknown_source_falls_back_to_first_node():
    steps = generate_bfs_steps(samples.traversal_graph(), "Z")
    assert steps[0].description == "BFS starting from node A. Enqueued A"


def test_dijkstra_warns_on_negative_weights():
    steps = generate_dijkstra_steps(samples.negative_weight_graph(), "A")
    assert steps[1].description.startswith("Warning: graph has negative edge weights")


# ---------------------------------------------------------------------------
# A* on a grid
# ---------------------------------------------------------------------------
def _adjacent(path):
    return all(astar.manhattan(a, b) == 1 for a, b in zip(path, path[1:]))


def test_astar_finds_path_on_open_grid():
    steps = astar.generate_astar_steps(astar.make_grid(3, 3))
    final = steps[-1].snapshot.data

    assert steps[0].description == "A* Search: finding path from (0,0) to (2,2)"
    assert "Manhattan" in steps[1].description
    assert final.path_found
    assert final.path[0] == (0, 0) and final.path[-1] == (2, 2)
    assert _adjacent(final.path)
    assert steps[-1].description == "Path found! Length: 5 cells, cost: 4"


def test_astar_reports_blocked_grid():
    grid = astar.make_grid(3, 3, walls=[(0, 1), (1, 1), (2, 1)])
    steps = astar.generate_astar_steps(grid)
    final = steps[-1].snapshot.data

    assert steps[-1].description == "No path exists between start and end cells"
    assert not final.path_found
    assert final.path == []
    assert (0, 0) in final.closed_set


def test_astar_detour_cost_is_optimal():
    grid = astar.make_grid(3, 3, walls=[(0, 1), (1, 1)], end=(0, 2))
    steps = astar.generate_astar_steps(grid)
    final = steps[-1].snapshot.data

    assert steps[-1].description == "Path found! Length: 7 cells, cost: 6"
    assert final.cell((0, 2)).g == 6
    assert _adjacent(final.path)
    assert all(final.cell(p).type is not astar.CellType.WALL for p in final.path)


def test_astar_maze_cost_matches_manhattan_when_unobstructed():
    grid = astar.make_grid(5, 5, walls=[(1, 1), (1, 2), (2, 2), (3, 2)])
    final = astar.generate_astar_steps(grid)[-1].snapshot.data
    assert final.path_found
    assert final.cell((4, 4)).g == 8
    assert len(final.path) == 9


def test_astar_leaves_input_grid_untouched():
    grid = astar.sample_grid()
    astar.generate_astar_steps(grid)
    assert grid.open_set == [] and grid.path == []
    assert all(math.isinf(c.g) for row in grid.cells for c in row)


def test_astar_sample_and_dict_grids():
    grid = astar.sample_grid(8, 10)
    assert (grid.rows, grid.cols) == (8, 10)
    assert grid.cell((0, 0)).type is astar.CellType.START
    assert grid.cell((7, 9)).type is astar.CellType.END
    assert sum(c.type is astar.CellType.WALL for row in grid.cells for c in row) == 14

    loaded = astar.grid_from_dict({"rows": 2, "cols": 3, "walls": [[0, 1]], "start": [1, 0]})
    assert loaded.start == (1, 0) and loaded.end == (1, 2)
    assert loaded.cell((0, 1)).type is astar.CellType.WALL

    outside = astar.make_grid(2, 2, end=(5, 5))
    assert astar.generate_astar_steps(outside)[-1].description.startswith("Error:")
    assert astar.generate_astar_steps(astar.make_grid(0, 0))[-1].description == \
        "Grid is empty. Nothing to search"


def test_astar_random_grid_is_seeded():
    a = astar.random_grid(6, 7, 0.3, seed=5)
    b = astar.random_grid(6, 7, 0.3, seed=5)

    def walls(g):
        return [(c.row, c.col) for row in g.cells for c in row if c.type is astar.CellType.WALL]

    assert walls(a) == walls(b)
    assert a.cell((0, 0)).type is astar.CellType.START
    assert a.cell((5, 6)).type is astar.CellType.END
