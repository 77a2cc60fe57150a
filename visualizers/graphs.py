"""
graphs.py — Graph Algorithm Visualizers
========================================
One subclass per algorithm.  The current structure is a plain `Graph`
(states reset); every run returns `GraphRun` snapshots and leaves the
graph untouched.  A* works on a grid instead and has its own
`AStarVisualizer` at the bottom of this module.

Actions:
    run     – run the algorithm (DEFAULT_ACTION); params: source, target
    random  – replace the graph with a random one; params: nodes, seed
    reset   – restore the built-in sample graph

`action.data` may also be a serialised graph dict ({nodes, edges,
directed}), as produced by `Graph.to_dict()`.
"""

from abc import abstractmethod
from typing import Any, Callable, Dict, List, Optional

from algorithms import astar, bellman_ford, bfs, dfs, dijkstra, kruskal, prim, topological_sort
from algorithms.graph_run import GraphRun
from algorithms.step import Step
from config import Config
from graph import Graph, samples
from ui.canvas import draw_graph, draw_grid
from visualizers.base import (
    Visualizer, VisualizerConfig, ActionButton, InputField, ComplexityInfo,
    complexity, param_int, param_number, param_str,
)


class GraphVisualizer(Visualizer):
    """Subclasses set `config`, `PSEUDOCODE`, `COMPLEXITY` and implement `_run`."""

    DEFAULT_ACTION = "run"
    PSEUDOCODE:  List[str] = []
    COMPLEXITY:  ComplexityInfo
    USES_SOURCE  = False
    USES_TARGET  = False
    sample:      Callable[[], Graph] = staticmethod(samples.mst_graph)

    def _initial_structure(self) -> Graph:
        return self.sample()

    def _random_graph(self, num_nodes: int, seed: Optional[int]) -> Graph:
        return Graph.generate_random(num_nodes=num_nodes,
                                     edge_probability=Config.graph_edge_probability,
                                     seed=seed)

    def _dispatch(self, kind: str, data: Any, params: Dict[str, Any]) -> List[Step]:
        if kind == "random":
            n = param_int(params, "nodes", Config.graph_nodes, low=2, high=12)
            seed = param_number(params, "seed", None)
            graph = self._random_graph(n, int(seed) if seed is not None else None)
            return self._replace(graph, f"Generated random graph with {graph.node_count} nodes "
                                        f"and {graph.edge_count} edges")
        if kind == "reset":
            return self._replace(self.sample(), "Restored the sample graph")
        if isinstance(data, dict):
            data = Graph.from_dict(data)
        return self._run(data, params)

    @abstractmethod
    def _run(self, graph: Graph, params: Dict[str, Any]) -> List[Step]:
        ...

    def _render(self, data, ctx) -> None:
        draw_graph(ctx, data if isinstance(data, GraphRun) else GraphRun(graph=data))

    def get_pseudocode(self) -> List[str]:
        return list(self.PSEUDOCODE)

    def get_complexity(self) -> ComplexityInfo:
        return self.COMPLEXITY

    def get_inputs(self) -> List[InputField]:
        fields = []
        if self.USES_SOURCE:
            fields.append(InputField("source", "Start node", type="text", default_value="A"))
        if self.USES_TARGET:
            fields.append(InputField("target", "Target node", type="text", placeholder="optional"))
        fields.append(InputField("nodes", "Random graph size", type="range",
                                 default_value=Config.graph_nodes, min=2, max=12, step=1))
        return fields

    def get_actions(self) -> List[ActionButton]:
        return [
            ActionButton("run", "Run", primary=True),
            ActionButton("random", "Random graph"),
            ActionButton("reset", "Reset"),
        ]


# ---------------------------------------------------------------------------
# Minimum spanning trees
# ---------------------------------------------------------------------------
class KruskalVisualizer(GraphVisualizer):
    config = VisualizerConfig(
        id="kruskal", name="Kruskal's MST", category="graphs",
        description="Cheapest-edge-first spanning tree using a disjoint-set forest",
    )
    PSEUDOCODE = kruskal.PSEUDOCODE
    COMPLEXITY = complexity("O(E log E)", "O(E log E)", "O(E log E)", "O(V)")

    def _run(self, graph, params):
        return kruskal.generate_kruskal_steps(graph)


class PrimVisualizer(GraphVisualizer):
    config = VisualizerConfig(
        id="prim", name="Prim's MST", category="graphs",
        description="Grows a spanning tree from one node through a min-heap of edges",
    )
    PSEUDOCODE = prim.PSEUDOCODE
    COMPLEXITY = complexity("O(E log V)", "O(E log V)", "O(E log V)", "O(V + E)")
    USES_SOURCE = True

    def _run(self, graph, params):
        return prim.generate_prim_steps(graph, param_str(params, "source", None))


# ---------------------------------------------------------------------------
# Shortest paths
# ---------------------------------------------------------------------------
class DijkstraVisualizer(GraphVisualizer):
    config = VisualizerConfig(
        id="dijkstra", name="Dijkstra's Algorithm", category="graphs",
        description="Single-source shortest paths for non-negative weights",
    )
    PSEUDOCODE = dijkstra.PSEUDOCODE
    COMPLEXITY = complexity("O((V + E) log V)", "O((V + E) log V)", "O((V + E) log V)", "O(V)")
    USES_SOURCE = True
    sample = staticmethod(samples.shortest_path_graph)

    def _run(self, graph, params):
        return dijkstra.generate_dijkstra_steps(graph, param_str(params, "source", None))


class BellmanFordVisualizer(GraphVisualizer):
    config = VisualizerConfig(
        id="bellman-ford", name="Bellman-Ford", category="graphs",
        description="Shortest paths with negative weights and negative-cycle detection",
    )
    PSEUDOCODE = bellman_ford.PSEUDOCODE
    COMPLEXITY = complexity("O(E)", "O(V·E)", "O(V·E)", "O(V)")
    USES_SOURCE = True
    sample = staticmethod(samples.negative_weight_graph)

    def _random_graph(self, num_nodes, seed):
        return Graph.generate_random(num_nodes=num_nodes,
                                     edge_probability=Config.graph_edge_probability,
                                     directed=True, weight_range=(-2, 10), seed=seed)

    def _run(self, graph, params):
        return bellman_ford.generate_bellman_ford_steps(graph, param_str(params, "source", None))


# ---------------------------------------------------------------------------
# Ordering and traversal
# ---------------------------------------------------------------------------
class TopologicalSortVisualizer(GraphVisualizer):
    config = VisualizerConfig(
        id="topological-sort", name="Topological Sort", category="graphs",
        description="Kahn's algorithm on a directed graph, reporting cycles",
    )
    PSEUDOCODE = topological_sort.PSEUDOCODE
    COMPLEXITY = complexity("O(V + E)", "O(V + E)", "O(V + E)", "O(V)")
    sample = staticmethod(samples.dag)

    def _random_graph(self, num_nodes, seed):
        return Graph.generate_random_dag(num_nodes=num_nodes,
                                         edge_probability=Config.graph_edge_probability,
                                         seed=seed)

    def _run(self, graph, params):
        return topological_sort.generate_topological_sort_steps(graph)


class BFSVisualizer(GraphVisualizer):
    config = VisualizerConfig(
        id="bfs", name="Breadth-First Search", category="graphs",
        description="Level-order traversal; stops early at an optional target",
    )
    PSEUDOCODE = bfs.PSEUDOCODE
    COMPLEXITY = complexity("O(V + E)", "O(V + E)", "O(V + E)", "O(V)")
    USES_SOURCE = True
    USES_TARGET = True
    sample = staticmethod(samples.traversal_graph)

    def _run(self, graph, params):
        return bfs.generate_bfs_steps(graph, param_str(params, "source", None),
                                      param_str(params, "target", None))


class DFSVisualizer(GraphVisualizer):
    config = VisualizerConfig(
        id="dfs", name="Depth-First Search", category="graphs",
        description="Stack-based deep traversal; stops early at an optional target",
    )
    PSEUDOCODE = dfs.PSEUDOCODE
    COMPLEXITY = complexity("O(V + E)", "O(V + E)", "O(V + E)", "O(V)")
    USES_SOURCE = True
    USES_TARGET = True
    sample = staticmethod(samples.traversal_graph)

    def _run(self, graph, params):
        return dfs.generate_dfs_steps(graph, param_str(params, "source", None),
                                      param_str(params, "target", None))


# ---------------------------------------------------------------------------
# Grid pathfinding
# ---------------------------------------------------------------------------
class AStarVisualizer(Visualizer):
    """
    A* on a grid rather than a `Graph`.  The current structure is an
    `astar.GridData`; inline data is a dict {rows, cols, walls, start, end}.
    """

    config = VisualizerConfig(
        id="a-star", name="A* Search", category="graphs",
        description="Grid pathfinding guided by the Manhattan-distance heuristic",
        default_speed=400,
    )
    DEFAULT_ACTION = "run"

    def _initial_structure(self) -> astar.GridData:
        return astar.sample_grid(Config.grid_rows, Config.grid_cols)

    def _dispatch(self, kind: str, data: Any, params: Dict[str, Any]) -> List[Step]:
        rows = param_int(params, "rows", Config.grid_rows, low=3, high=15)
        cols = param_int(params, "cols", Config.grid_cols, low=3, high=20)
        if kind == "random":
            seed = param_number(params, "seed", None)
            grid = astar.random_grid(rows, cols, Config.grid_wall_density,
                                     int(seed) if seed is not None else None)
            return self._replace(grid, f"Generated a {rows}x{cols} grid with random walls")
        if kind == "reset":
            return self._replace(astar.sample_grid(rows, cols), "Reset to the sample grid")
        if isinstance(data, dict):
            data = astar.grid_from_dict(data)
        return astar.generate_astar_steps(data)

    def _render(self, data, ctx) -> None:
        draw_grid(ctx, data)

    def get_pseudocode(self) -> List[str]:
        return list(astar.PSEUDOCODE)

    def get_complexity(self) -> ComplexityInfo:
        return complexity("O(E)", "O((V + E) log V)", "O((V + E) log V)", "O(V)")

    def get_inputs(self) -> List[InputField]:
        return [
            InputField("rows", "Rows", default_value=Config.grid_rows, min=3, max=15, step=1),
            InputField("cols", "Columns", default_value=Config.grid_cols, min=3, max=20, step=1),
        ]

    def get_actions(self) -> List[ActionButton]:
        return [
            ActionButton("run", "Find path", primary=True),
            ActionButton("random", "New grid"),
            ActionButton("reset", "Reset"),
        ]


GRAPH_VISUALIZERS = [
    KruskalVisualizer, PrimVisualizer, DijkstraVisualizer, BellmanFordVisualizer,
    TopologicalSortVisualizer, BFSVisualizer, DFSVisualizer, AStarVisualizer,
]
