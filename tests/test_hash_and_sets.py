from algorithms import hash_table, union_find
from algorithms.hash_table import MAX_LOAD_FACTOR, build_table, hash_key
from algorithms.union_find import UFNode, UnionFindData, roots_of, singletons


def _keys(table):
    return sorted(e.key for b in table.buckets for e in b.entries)


# ---------------------------------------------------------------------------
# Hash table
# ---------------------------------------------------------------------------
def test_hash_function():
    assert hash_key("a", 8) == ord("a") % 8
    assert hash_key("ab", 8) == ((ord("a") % 8) * 31 + ord("b")) % 8
    assert hash_key("", 8) == 0


def test_insert_lookup_delete():
    table = hash_table.generate_insert_steps(hash_table.sample_table(), "fig", 2)[-1].snapshot.data
    assert table.size == 5
    assert "fig" in _keys(table)

    steps = hash_table.generate_lookup_steps(table, "fig")
    assert steps[-1].description == "Found 'fig' with value 2"

    table = hash_table.generate_delete_steps(table, "fig")[-1].snapshot.data
    assert table.size == 4
    assert "fig" not in _keys(table)


def test_insert_existing_key_updates_value():
    steps = hash_table.generate_insert_steps(hash_table.sample_table(), "apple", 42)
    table = steps[-1].snapshot.data
    assert table.size == 4
    entry = next(e for b in table.buckets for e in b.entries if e.key == "apple")
    assert entry.value == 42


def test_missing_keys_are_reported():
    assert hash_table.generate_lookup_steps(hash_table.sample_table(), "zzz")[-1].description.endswith("not found")
    assert hash_table.generate_delete_steps(hash_table.sample_table(), "zzz")[-1].description == \
        "Key 'zzz' not found. Nothing to delete"


def test_load_factor_warning():
    table = build_table([("a", 1), ("b", 2), ("c", 3)], capacity=4)
    steps = hash_table.generate_insert_steps(table, "d", 4)
    assert steps[-1].snapshot.data.load_factor > MAX_LOAD_FACTOR
    assert any(s.description.startswith("Warning: load factor") for s in steps)


def test_resize_doubles_and_rehashes_every_entry():
    steps = hash_table.generate_resize_steps(hash_table.sample_table())
    final = steps[-1].snapshot.data
    assert final.capacity == 16
    assert final.size == 4
    assert final.load_factor == hash_table.sample_table().load_factor / 2
    assert _keys(final) == ["apple", "banana", "cherry", "date"]
    assert sum(1 for s in steps if s.description.startswith("Rehashing")) == 4
    for i, bucket in enumerate(final.buckets):
        for e in bucket.entries:
            assert hash_key(e.key, 16) == i


def test_zero_capacity_is_raised_to_one_bucket(monkeypatch):
    table = build_table([("a", 1)], capacity=0)
    assert table.capacity == 1
    assert len(table.buckets) == 1

    steps = hash_table.generate_insert_steps(table, "b", 2)
    assert steps[-1].snapshot.data.size == 2

    from config import Config
    from visualizers import Action, HashTableVisualizer

    monkeypatch.setattr(Config, "hash_capacity", 0)
    viz = HashTableVisualizer()
    steps = viz.get_steps(Action("lookup", params={"key": "apple"}))
    assert steps[-1].description == "Found 'apple' with value 5"


def test_clear():
    final = hash_table.generate_clear_steps(hash_table.sample_table())[-1].snapshot.data
    assert final.size == 0
    assert final.capacity == 8
    assert _keys(final) == []


# ---------------------------------------------------------------------------
# Union-Find
# ---------------------------------------------------------------------------
def test_union_equal_rank_attaches_y_under_x():
    steps = union_find.generate_union_steps(singletons(4), 0, 1)
    nodes = {n.id: n for n in steps[-1].snapshot.data.nodes}
    assert nodes[1].parent == 0
    assert nodes[0].rank == 1
    assert steps[-1].description == "Union complete. 0 and 1 now share root 0"


def test_union_by_rank_lower_goes_under_higher():
    steps = union_find.generate_union_steps(union_find.sample_forest(), 5, 0)
    nodes = {n.id: n for n in steps[-1].snapshot.data.nodes}
    assert nodes[5].parent == 0
    assert nodes[0].rank == 1


def test_union_same_set():
    steps = union_find.generate_union_steps(union_find.sample_forest(), 1, 2)
    assert steps[-1].description == "1 and 2 are already in the same set (root 0). No union needed"


def test_find_compresses_path():
    chain = UnionFindData(nodes=[
        UFNode(0, 0, 3), UFNode(1, 0, 2), UFNode(2, 1, 1), UFNode(3, 2, 0),
    ])
    steps = union_find.generate_find_steps(chain, 3)
    nodes = {n.id: n for n in steps[-1].snapshot.data.nodes}

    assert steps[-1].description == "find(3) = 0"
    assert nodes[3].parent == 0
    assert nodes[2].parent == 0
    assert chain.nodes[3].parent == 2, "input structure must not change"


def test_unknown_id_is_a_single_step():
    steps = union_find.generate_find_steps(union_find.sample_forest(), 42)
    assert len(steps) == 1
    assert steps[0].description == "Element 42 not found"


def test_connected_and_make_set():
    forest = union_find.sample_forest()
    assert union_find.generate_connected_steps(forest, 1, 2)[-1].description == \
        "1 and 2 are connected (common root 0)"
    assert union_find.generate_connected_steps(forest, 2, 3)[-1].description == \
        "2 and 3 are NOT connected (roots 0 and 3)"

    data = union_find.generate_make_set_steps(forest, 9)[-1].snapshot.data
    assert roots_of(data)[9] == 9


def test_union_rank_two_with_rank_zero_keeps_rank():
    forest = UnionFindData(nodes=[
        UFNode(0, 0, 2), UFNode(1, 0, 1), UFNode(2, 1, 0), UFNode(3, 3, 0),
    ])
    steps = union_find.generate_union_steps(forest, 3, 2)
    nodes = {n.id: n for n in steps[-1].snapshot.data.nodes}
    assert nodes[3].parent == 0
    assert nodes[0].rank == 2
