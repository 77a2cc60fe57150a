"""
trie.py — Prefix Tree
======================
insert / search / prefix over lowercase words.

Children are kept sorted by character so traversal and rendering order
are deterministic.  Node ids are derived from the path from the root
(`trie:` + prefix), so the same word always produces the same ids.
"""

import bisect
import copy
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional

from algorithms.step import Step, StepBuilder


class TrieNodeState(Enum):
    DEFAULT   = "default"
    CURRENT   = "current"
    VISITED   = "visited"
    FOUND     = "found"
    INSERTED  = "inserted"
    NOT_FOUND = "notFound"


@dataclass
class TrieNode:
    id:              str
    char:            str
    is_end_of_word:  bool                = False
    children:        List["TrieNode"]    = field(default_factory=list)
    state:           TrieNodeState       = TrieNodeState.DEFAULT
    depth:           int                 = 0

    def child(self, ch: str) -> Optional["TrieNode"]:
        for c in self.children:
            if c.char == ch:
                return c
        return None

    def add_child(self, node: "TrieNode") -> None:
        keys = [c.char for c in self.children]
        self.children.insert(bisect.bisect_left(keys, node.char), node)


@dataclass
class TrieData:
    root:        TrieNode
    word_count:  int = 0


PSEUDOCODE: List[str] = [
    "insert(word):",                                    # 0
    "  node = root",                                    # 1
    "  for c in word:",                                 # 2
    "    if c not in node.children: create child",      # 3
    "    node = node.children[c]",                      # 4
    "  node.isEndOfWord = true",                        # 5
    "search(word): walk; return node.isEndOfWord",      # 6
    "startsWith(prefix): walk; collect words below",    # 7
]

SAMPLE_WORDS = ["cat", "car", "card", "care", "cart", "dog", "do", "dot"]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def _node_id(prefix: str) -> str:
    return f"trie:{prefix}"


def empty_trie() -> TrieData:
    return TrieData(root=TrieNode(id=_node_id(""), char=""))


def build_trie(words) -> TrieData:
    data = empty_trie()
    for word in words:
        node = data.root
        for i, ch in enumerate(word):
            nxt = node.child(ch)
            if nxt is None:
                nxt = TrieNode(id=_node_id(word[:i + 1]), char=ch, depth=i + 1)
                node.add_child(nxt)
            node = nxt
        if not node.is_end_of_word:
            node.is_end_of_word = True
            data.word_count += 1
    return data


def sample_trie() -> TrieData:
    return build_trie(SAMPLE_WORDS)


def iter_trie(node: TrieNode) -> Iterator[TrieNode]:
    yield node
    for c in node.children:
        yield from iter_trie(c)


def all_words(node: TrieNode, prefix: str = "") -> List[str]:
    words = [prefix] if node.is_end_of_word else []
    for c in node.children:
        words.extend(all_words(c, prefix + c.char))
    return words


def _reset(data: TrieData) -> None:
    for node in iter_trie(data.root):
        node.state = TrieNodeState.DEFAULT


def _start(data: TrieData) -> TrieData:
    work = copy.deepcopy(data)
    _reset(work)
    return work


def _normalise(word: str) -> str:
    return (word or "").strip().lower()


# ---------------------------------------------------------------------------
# Insert
# ---------------------------------------------------------------------------
def generate_insert_steps(data: TrieData, word: str) -> List[Step]:
    work = _start(data)
    word = _normalise(word)
    sb = StepBuilder()

    sb.push(f"Inserting word '{word}'", work, line=0)
    if not word:
        sb.push("Cannot insert an empty word", work, line=0)
        return sb.steps

    node = work.root
    node.state = TrieNodeState.CURRENT
    for i, ch in enumerate(word):
        sb.reads += 1
        nxt = node.child(ch)
        node.state = TrieNodeState.VISITED
        if nxt is None:
            sb.writes += 1
            nxt = TrieNode(id=_node_id(word[:i + 1]), char=ch, depth=i + 1,
                           state=TrieNodeState.INSERTED)
            node.add_child(nxt)
            sb.push(f"'{ch}' not found. Created new node for '{ch}'", work, line=3)
        else:
            nxt.state = TrieNodeState.CURRENT
            sb.push(f"'{ch}' already exists. Moving to node '{ch}'", work, line=4)
        node = nxt

    if node.is_end_of_word:
        node.state = TrieNodeState.FOUND
        sb.push(f"Word '{word}' already exists in the trie", work, line=5)
    else:
        sb.writes += 1
        node.is_end_of_word = True
        work.word_count += 1
        node.state = TrieNodeState.INSERTED
        sb.push(f"Marked '{ch}' as end of word. '{word}' inserted", work, line=5)

    _reset(work)
    sb.push(f"Insert complete. Trie holds {work.word_count} word(s)", work, line=0)
    return sb.steps


# ---------------------------------------------------------------------------
# Search
# ---------------------------------------------------------------------------
def generate_search_steps(data: TrieData, word: str) -> List[Step]:
    work = _start(data)
    word = _normalise(word)
    sb = StepBuilder()

    sb.push(f"Searching for word '{word}'", work, line=6)
    node = work.root
    for ch in word:
        sb.reads += 1
        sb.comparisons += 1
        nxt = node.child(ch)
        if nxt is None:
            node.state = TrieNodeState.NOT_FOUND
            sb.push(f"'{ch}' not found under '{node.char or 'root'}'", work, line=6)
            _reset(work)
            sb.push(f"Word '{word}' not found", work, line=6)
            return sb.steps
        node.state = TrieNodeState.VISITED
        nxt.state = TrieNodeState.CURRENT
        sb.push(f"Found '{ch}', moving down", work, line=6)
        node = nxt

    if node.is_end_of_word:
        node.state = TrieNodeState.FOUND
        sb.push(f"Word '{word}' found!", work, line=6)
    else:
        node.state = TrieNodeState.NOT_FOUND
        sb.push(f"'{word}' is a prefix but not a complete word", work, line=6)
    return sb.steps


# ---------------------------------------------------------------------------
# Prefix
# ---------------------------------------------------------------------------
def generate_prefix_steps(data: TrieData, prefix: str) -> List[Step]:
    work = _start(data)
    prefix = _normalise(prefix)
    sb = StepBuilder()

    sb.push(f"Finding all words with prefix '{prefix}'", work, line=7)
    node = work.root
    for ch in prefix:
        sb.reads += 1
        sb.comparisons += 1
        nxt = node.child(ch)
        if nxt is None:
            node.state = TrieNodeState.NOT_FOUND
            sb.push(f"'{ch}' not found. No words with prefix '{prefix}'", work, line=7)
            _reset(work)
            sb.push(f"Found 0 word(s) with prefix '{prefix}'", work, line=7)
            return sb.steps
        node.state = TrieNodeState.VISITED
        nxt.state = TrieNodeState.CURRENT
        sb.push(f"Found '{ch}', moving down", work, line=7)
        node = nxt

    sb.push(f"Prefix '{prefix}' exists. Collecting words below it", work, line=7)

    found: List[str] = []

    def collect(n: TrieNode, so_far: str) -> None:
        sb.reads += 1
        if n.is_end_of_word:
            found.append(so_far)
            n.state = TrieNodeState.FOUND
            sb.push(f"Found word: '{so_far}'", work, line=7)
        for c in n.children:
            collect(c, so_far + c.char)

    collect(node, prefix)
    listing = ", ".join(found)
    sb.push(f"Found {len(found)} word(s) with prefix '{prefix}': [{listing}]", work, line=7)
    return sb.steps
