import pytest

from algorithms import avl, bst, trie
from algorithms.bst import BSTData, inorder_values, iter_nodes


# ---------------------------------------------------------------------------
# BST
# ---------------------------------------------------------------------------
def test_bst_insert_keeps_inorder_sorted():
    data = bst.sample_tree()
    for v in (45, 65, 10):
        data = bst.generate_insert_steps(data, v)[-1].snapshot.data
    assert inorder_values(data.root) == sorted([50, 30, 70, 20, 40, 60, 80, 45, 65, 10])


def test_bst_insert_into_empty_and_duplicate():
    steps = bst.generate_insert_steps(BSTData(), 5)
    assert steps[-1].snapshot.data.root.value == 5
    assert steps[-1].snapshot.data.root.id == "bst-5"

    steps = bst.generate_insert_steps(bst.sample_tree(), 40)
    assert steps[-1].description == "Tree unchanged: 40 already exists"


def test_bst_search_found_and_missing():
    assert bst.generate_search_steps(bst.sample_tree(), 60)[-1].description == "Found 60!"
    assert bst.generate_search_steps(bst.sample_tree(), 65)[-1].description == "65 not found in the tree"
    assert bst.generate_search_steps(BSTData(), 1)[-1].description == "Tree is empty. 1 not found"


@pytest.mark.parametrize("value", [20, 30, 50, 80])
def test_bst_delete_preserves_order(value):
    steps = bst.generate_delete_steps(bst.sample_tree(), value)
    expected = [v for v in (20, 30, 40, 50, 60, 70, 80) if v != value]
    assert inorder_values(steps[-1].snapshot.data.root) == expected


def test_bst_delete_two_children_uses_successor():
    steps = bst.generate_delete_steps(bst.sample_tree(), 50)
    root = steps[-1].snapshot.data.root
    assert root.value == 60
    assert root.id == "bst-60"
    assert any("successor 60" in s.description for s in steps)


def test_bst_inorder_traversal():
    steps = bst.generate_inorder_steps(bst.sample_tree())
    assert steps[-1].description == "Inorder traversal: [20, 30, 40, 50, 60, 70, 80]"


def test_bst_preorder_traversal():
    steps = bst.generate_traversal_steps(bst.sample_tree(), "preorder")
    assert steps[-1].description == "Preorder traversal: [50, 30, 20, 40, 70, 60, 80]"


# ---------------------------------------------------------------------------
# AVL
# ---------------------------------------------------------------------------
def test_avl_right_right_case():
    steps = avl.generate_insert_steps(avl.build_tree([10, 20]), 30)
    descriptions = [s.description for s in steps]

    assert "Right-Right case at 10. Performing left rotation." in descriptions
    assert "Left rotation complete. New subtree root: 20" in descriptions
    root = steps[-1].snapshot.data.root
    assert root.value == 20
    assert avl.is_balanced(root)


def test_avl_left_right_case():
    steps = avl.generate_insert_steps(avl.build_tree([30, 10]), 20)
    descriptions = [s.description for s in steps]

    assert "Left-Right case at 30. First: left rotate at 10" in descriptions
    assert "Now: right rotate at 30" in descriptions
    assert steps[-1].snapshot.data.root.value == 20


def test_avl_right_left_case():
    steps = avl.generate_insert_steps(avl.build_tree([10, 30]), 20)
    descriptions = [s.description for s in steps]

    assert "Right-Left case at 10. First: right rotate at 30" in descriptions
    assert "Now: left rotate at 10" in descriptions
    root = steps[-1].snapshot.data.root
    assert root.value == 20
    assert [root.left.value, root.right.value] == [10, 30]
    assert avl.is_balanced(root)


def test_avl_rotation_marks_new_root_balanced():
    steps = avl.generate_insert_steps(avl.build_tree([30, 20]), 10)
    post = next(s for s in steps if s.description.startswith("Right rotation complete"))
    assert post.snapshot.data.root.state == avl.AVLNodeState.BALANCED


def test_avl_stays_balanced_on_sequential_inserts():
    data = avl.AVLData()
    for v in range(1, 16):
        data = avl.generate_insert_steps(data, v)[-1].snapshot.data
    assert avl.is_balanced(data.root)
    assert inorder_values(data.root) == list(range(1, 16))
    assert data.root.height == 4
    for node in iter_nodes(data.root):
        assert node.balance_factor == avl.height(node.left) - avl.height(node.right)


def test_avl_search():
    assert avl.generate_search_steps(avl.sample_tree(), 25)[-1].description == "Found 25!"
    assert avl.generate_search_steps(avl.sample_tree(), 26)[-1].description == "Value 26 not found in tree"


# ---------------------------------------------------------------------------
# Trie
# ---------------------------------------------------------------------------
def test_trie_insert_and_search():
    data = trie.generate_insert_steps(trie.empty_trie(), "Tea")[-1].snapshot.data
    assert data.word_count == 1
    assert trie.all_words(data.root) == ["tea"]

    assert trie.generate_search_steps(data, "tea")[-1].description == "Word 'tea' found!"
    assert trie.generate_search_steps(data, "te")[-1].description == "'te' is a prefix but not a complete word"
    assert trie.generate_search_steps(data, "tx")[-1].description == "Word 'tx' not found"


def test_trie_children_sorted_and_ids_path_based():
    data = trie.build_trie(["cb", "ca", "cc"])
    c = data.root.children[0]
    assert [n.char for n in c.children] == ["a", "b", "c"]
    assert c.children[1].id == "trie:cb"


def test_trie_duplicate_insert():
    steps = trie.generate_insert_steps(trie.sample_trie(), "dog")
    assert "Word 'dog' already exists in the trie" in [s.description for s in steps]
    assert steps[-1].snapshot.data.word_count == 8


def test_trie_prefix_collects_words():
    steps = trie.generate_prefix_steps(trie.sample_trie(), "car")
    assert steps[-1].description == "Found 4 word(s) with prefix 'car': [car, card, care, cart]"

    steps = trie.generate_prefix_steps(trie.sample_trie(), "z")
    assert steps[-1].description == "Found 0 word(s) with prefix 'z'"
