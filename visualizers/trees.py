"""
trees.py — BST, AVL and Trie Visualizers
=========================================
Default actions:  bst → search,  avl → insert,  trie → search.
"""

from typing import Any, Dict, List, Optional

from algorithms import avl, bst, trie
from algorithms.step import Step
from ui.canvas import draw_binary_tree, draw_trie
from visualizers.base import (
    Visualizer, VisualizerConfig, ActionButton, InputField, CodeSnippets, ComplexityInfo,
    complexity, param_number, param_str,
)

DEFAULT_VALUE = 45
DEFAULT_WORD  = "car"

TRAVERSAL_ORDERS = ("inorder", "preorder", "postorder")


# ---------------------------------------------------------------------------
# Binary search tree
# ---------------------------------------------------------------------------
class BSTVisualizer(Visualizer):
    config = VisualizerConfig(
        id="bst", name="Binary Search Tree", category="trees",
        description="Insert, search, delete (in-order successor) and traversals",
    )
    DEFAULT_ACTION = "search"
    MUTATING_ACTIONS = frozenset({"insert", "delete"})

    def _initial_structure(self):
        return bst.sample_tree()

    def _dispatch(self, kind: str, data: Any, params: Dict[str, Any]) -> List[Step]:
        if kind == "clear":
            return self._replace(bst.BSTData(), "Tree cleared")
        if kind == "inorder":
            order = param_str(params, "order", "inorder")
            return bst.generate_traversal_steps(data, order if order in TRAVERSAL_ORDERS else "inorder")
        value = param_number(params, "value", DEFAULT_VALUE)
        if kind == "insert":
            return bst.generate_insert_steps(data, value)
        if kind == "delete":
            return bst.generate_delete_steps(data, value)
        return bst.generate_search_steps(data, value)

    def _render(self, data, ctx) -> None:
        draw_binary_tree(ctx, data.root)

    def get_pseudocode(self) -> List[str]:
        return list(bst.PSEUDOCODE)

    def get_complexity(self) -> ComplexityInfo:
        return complexity("O(log n)", "O(log n)", "O(n)", "O(n)")

    def get_inputs(self) -> List[InputField]:
        return [InputField("value", "Value", default_value=DEFAULT_VALUE, min=-999, max=999, step=1)]

    def get_actions(self) -> List[ActionButton]:
        return [
            ActionButton("insert", "Insert", primary=True),
            ActionButton("search", "Search"),
            ActionButton("delete", "Delete"),
            ActionButton("inorder", "Traverse"),
            ActionButton("clear", "Clear"),
        ]

    def get_code(self) -> Optional[CodeSnippets]:
        return CodeSnippets(python=[
            "def insert(node, value):",
            "    if node is None:",
            "        return Node(value)",
            "    if value < node.value:",
            "        node.left = insert(node.left, value)",
            "    elif value > node.value:",
            "        node.right = insert(node.right, value)",
            "    return node",
        ])


# ---------------------------------------------------------------------------
# AVL tree
# ---------------------------------------------------------------------------
class AVLVisualizer(Visualizer):
    config = VisualizerConfig(
        id="avl", name="AVL Tree", category="trees",
        description="Self-balancing BST with LL, RR, LR and RL rotations",
    )
    DEFAULT_ACTION = "insert"
    MUTATING_ACTIONS = frozenset({"insert"})

    def _initial_structure(self):
        return avl.sample_tree()

    def _dispatch(self, kind: str, data: Any, params: Dict[str, Any]) -> List[Step]:
        if kind == "clear":
            return self._replace(avl.AVLData(), "Tree cleared")
        value = param_number(params, "value", DEFAULT_VALUE)
        if kind == "search":
            return avl.generate_search_steps(data, value)
        return avl.generate_insert_steps(data, value)

    def _render(self, data, ctx) -> None:
        draw_binary_tree(ctx, data.root, show_balance=True)

    def get_pseudocode(self) -> List[str]:
        return list(avl.PSEUDOCODE)

    def get_complexity(self) -> ComplexityInfo:
        return complexity("O(log n)", "O(log n)", "O(log n)", "O(n)")

    def get_inputs(self) -> List[InputField]:
        return [InputField("value", "Value", default_value=DEFAULT_VALUE, min=-999, max=999, step=1)]

    def get_actions(self) -> List[ActionButton]:
        return [
            ActionButton("insert", "Insert", primary=True),
            ActionButton("search", "Search"),
            ActionButton("clear", "Clear"),
        ]


# ---------------------------------------------------------------------------
# Trie
# ---------------------------------------------------------------------------
class TrieVisualizer(Visualizer):
    config = VisualizerConfig(
        id="trie", name="Trie", category="trees",
        description="Prefix tree: insert words, search words, list words by prefix",
    )
    DEFAULT_ACTION = "search"
    MUTATING_ACTIONS = frozenset({"insert"})

    def _initial_structure(self):
        return trie.sample_trie()

    def _dispatch(self, kind: str, data: Any, params: Dict[str, Any]) -> List[Step]:
        if kind == "clear":
            return self._replace(trie.empty_trie(), "Trie cleared")
        word = param_str(params, "word", DEFAULT_WORD)
        if kind == "insert":
            return trie.generate_insert_steps(data, word)
        if kind == "prefix":
            return trie.generate_prefix_steps(data, word)
        return trie.generate_search_steps(data, word)

    def _render(self, data, ctx) -> None:
        draw_trie(ctx, data)

    def get_pseudocode(self) -> List[str]:
        return list(trie.PSEUDOCODE)

    def get_complexity(self) -> ComplexityInfo:
        return complexity("O(m)", "O(m)", "O(m)", "O(n·m)")

    def get_inputs(self) -> List[InputField]:
        return [InputField("word", "Word", type="text", default_value=DEFAULT_WORD,
                           placeholder="lowercase letters")]

    def get_actions(self) -> List[ActionButton]:
        return [
            ActionButton("insert", "Insert", primary=True),
            ActionButton("search", "Search"),
            ActionButton("prefix", "Starts with"),
            ActionButton("clear", "Clear"),
        ]
