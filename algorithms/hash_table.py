"""
hash_table.py — Separate-Chaining Hash Table
=============================================
insert / lookup / delete / resize / clear over a list of buckets.

    hash(key) = |fold(h * 31 + ord(c)) mod capacity|

Insert reports one of three outcomes after the "hashed to bucket k"
step: update-in-place (size unchanged), collision (bucket already holds
other keys) or empty bucket.  Crossing MAX_LOAD_FACTOR only produces a
warning step; growing the table is the separate `resize` operation,
which doubles capacity and rehashes every entry one step at a time.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from algorithms.step import Step, StepBuilder


class EntryState(Enum):
    DEFAULT   = "default"
    HASHING   = "hashing"
    COLLISION = "collision"
    INSERTED  = "inserted"
    FOUND     = "found"
    DELETED   = "deleted"


class BucketState(Enum):
    DEFAULT   = "default"
    ACTIVE    = "active"
    COLLISION = "collision"


@dataclass
class HashEntry:
    key:    str
    value:  float
    state:  EntryState = EntryState.DEFAULT


@dataclass
class Bucket:
    entries:  List[HashEntry] = field(default_factory=list)
    state:    BucketState     = BucketState.DEFAULT


@dataclass
class HashTableData:
    buckets:      List[Bucket] = field(default_factory=list)
    size:         int          = 0
    capacity:     int          = 0
    load_factor:  float        = 0.0


DEFAULT_CAPACITY = 8
MAX_LOAD_FACTOR  = 0.75

SAMPLE_ENTRIES = [("apple", 5), ("banana", 7), ("cherry", 3), ("date", 9)]

PSEUDOCODE: List[str] = [
    "hash(key): h = 0; for c in key: h = (h * 31 + code(c)) % capacity",  # 0
    "insert(key, value):",                                  # 1
    "  i = hash(key)",                                      # 2
    "  if key in bucket[i]: update value",                  # 3
    "  else: bucket[i].append((key, value)); size++",       # 4
    "  if size / capacity > 0.75: warn",                    # 5
    "lookup(key): scan bucket[hash(key)]",                  # 6
    "delete(key): remove from bucket[hash(key)]; size--",   # 7
    "resize(): capacity *= 2; rehash every entry",          # 8
]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def hash_key(key: str, capacity: int) -> int:
    h = 0
    for ch in key:
        h = (h * 31 + ord(ch)) % capacity
    return abs(h)


def empty_table(capacity: int = DEFAULT_CAPACITY) -> HashTableData:
    """Capacity is raised to at least one bucket."""
    capacity = max(1, int(capacity))
    return HashTableData(buckets=[Bucket() for _ in range(capacity)], size=0,
                         capacity=capacity, load_factor=0.0)


def build_table(entries, capacity: int = DEFAULT_CAPACITY) -> HashTableData:
    """Silent inserts, used for samples and fixtures."""
    table = empty_table(capacity)
    capacity = table.capacity
    for key, value in entries:
        bucket = table.buckets[hash_key(key, capacity)]
        existing = next((e for e in bucket.entries if e.key == key), None)
        if existing is not None:
            existing.value = value
        else:
            bucket.entries.append(HashEntry(key, value))
            table.size += 1
    table.load_factor = table.size / capacity
    return table


def sample_table() -> HashTableData:
    return build_table(SAMPLE_ENTRIES)


def _clone(data: HashTableData) -> HashTableData:
    buckets = [Bucket(entries=[HashEntry(e.key, e.value) for e in b.entries])
               for b in data.buckets]
    capacity = max(data.capacity or len(buckets), 1)
    buckets.extend(Bucket() for _ in range(capacity - len(buckets)))
    return HashTableData(buckets=buckets, size=data.size, capacity=capacity,
                         load_factor=data.size / capacity)


def _reset(table: HashTableData) -> None:
    for b in table.buckets:
        b.state = BucketState.DEFAULT
        for e in b.entries:
            e.state = EntryState.DEFAULT


def _find(bucket: Bucket, key: str, sb: StepBuilder, table: HashTableData, index: int) -> Optional[HashEntry]:
    """Walk one chain, one comparison + step per entry."""
    for entry in bucket.entries:
        sb.comparisons += 1
        sb.reads += 1
        entry.state = EntryState.HASHING
        if entry.key == key:
            entry.state = EntryState.FOUND
            sb.push(f"Comparing '{entry.key}' with '{key}': match", table, line=6,
                    active=[index])
            return entry
        sb.push(f"Comparing '{entry.key}' with '{key}': no match", table, line=6,
                active=[index])
        entry.state = EntryState.DEFAULT
    return None


def _load(table: HashTableData) -> str:
    return f"{table.size}/{table.capacity} = {table.load_factor:.2f}"


# ---------------------------------------------------------------------------
# Insert
# ---------------------------------------------------------------------------
def generate_insert_steps(data: HashTableData, key: str, value: float) -> List[Step]:
    table = _clone(data)
    sb = StepBuilder()

    sb.push(f"Inserting key '{key}' with value {value}", table, line=1)

    index = hash_key(key, table.capacity)
    bucket = table.buckets[index]
    bucket.state = BucketState.ACTIVE
    sb.push(f"hash('{key}') = {index}: '{key}' hashed to bucket {index}", table,
            line=2, active=[index])

    existing = next((e for e in bucket.entries if e.key == key), None)
    if existing is not None:
        sb.comparisons += bucket.entries.index(existing) + 1
        old = existing.value
        sb.writes += 1
        existing.value = value
        existing.state = EntryState.FOUND
        sb.push(f"Key '{key}' already exists. Updating value {old} → {value}", table,
                line=3, active=[index], modified=[index])
    else:
        sb.comparisons += len(bucket.entries)
        sb.writes += 1
        if bucket.entries:
            bucket.state = BucketState.COLLISION
            for e in bucket.entries:
                e.state = EntryState.COLLISION
            keys = ", ".join(f"'{e.key}'" for e in bucket.entries)
            sb.push(f"Collision! Bucket {index} already holds {keys}. Chaining '{key}'",
                    table, line=4, active=[index])
        else:
            sb.push(f"Bucket {index} is empty", table, line=4, active=[index])

        bucket.entries.append(HashEntry(key, value, EntryState.INSERTED))
        table.size += 1
        table.load_factor = table.size / table.capacity
        sb.push(f"Inserted '{key}' → {value} into bucket {index}. Size: {table.size}",
                table, line=4, active=[index], modified=[index])

    if table.load_factor > MAX_LOAD_FACTOR:
        sb.push(
            f"Warning: load factor {_load(table)} exceeds {MAX_LOAD_FACTOR}. "
            f"Consider resizing the table.",
            table, line=5, color="#f59e0b",
        )

    _reset(table)
    sb.push(f"Insert complete. Load factor: {_load(table)}", table, line=1)
    return sb.steps


# ---------------------------------------------------------------------------
# Lookup / Delete
# ---------------------------------------------------------------------------
def generate_lookup_steps(data: HashTableData, key: str) -> List[Step]:
    table = _clone(data)
    sb = StepBuilder()

    sb.push(f"Looking up key '{key}'", table, line=6)
    index = hash_key(key, table.capacity)
    bucket = table.buckets[index]
    bucket.state = BucketState.ACTIVE
    sb.push(f"'{key}' hashed to bucket {index}", table, line=2, active=[index])

    if not bucket.entries:
        _reset(table)
        sb.push(f"Bucket {index} is empty. Key '{key}' not found", table, line=6)
        return sb.steps

    entry = _find(bucket, key, sb, table, index)
    if entry is None:
        _reset(table)
        sb.push(f"Key '{key}' not found", table, line=6)
        return sb.steps

    _reset(table)
    entry.state = EntryState.FOUND
    sb.push(f"Found '{key}' with value {entry.value}", table, line=6, active=[index])
    return sb.steps


def generate_delete_steps(data: HashTableData, key: str) -> List[Step]:
    table = _clone(data)
    sb = StepBuilder()

    sb.push(f"Deleting key '{key}'", table, line=7)
    index = hash_key(key, table.capacity)
    bucket = table.buckets[index]
    bucket.state = BucketState.ACTIVE
    sb.push(f"'{key}' hashed to bucket {index}", table, line=2, active=[index])

    entry = _find(bucket, key, sb, table, index) if bucket.entries else None
    if entry is None:
        _reset(table)
        sb.push(f"Key '{key}' not found. Nothing to delete", table, line=7)
        return sb.steps

    entry.state = EntryState.DELETED
    sb.push(f"Removing '{key}' from bucket {index}", table, line=7,
            active=[index], modified=[index])

    sb.writes += 1
    bucket.entries.remove(entry)
    table.size -= 1
    table.load_factor = table.size / table.capacity
    _reset(table)
    sb.push(f"Deleted '{key}'. Size: {table.size}, load factor: {_load(table)}",
            table, line=7)
    return sb.steps


# ---------------------------------------------------------------------------
# Resize / Clear
# ---------------------------------------------------------------------------
def generate_resize_steps(data: HashTableData) -> List[Step]:
    old = _clone(data)
    new_capacity = old.capacity * 2
    sb = StepBuilder()

    sb.push(f"Resizing table from {old.capacity} to {new_capacity} buckets "
            f"(load factor {_load(old)})", old, line=8)

    table = HashTableData(buckets=[Bucket() for _ in range(new_capacity)],
                          size=old.size, capacity=new_capacity,
                          load_factor=old.size / new_capacity)
    pending: List[Tuple[int, HashEntry]] = [
        (i, e) for i, b in enumerate(old.buckets) for e in b.entries
    ]

    for old_index, entry in pending:
        sb.reads += 1
        sb.writes += 1
        new_index = hash_key(entry.key, new_capacity)
        _reset(table)
        table.buckets[new_index].state = BucketState.ACTIVE
        table.buckets[new_index].entries.append(
            HashEntry(entry.key, entry.value, EntryState.INSERTED)
        )
        sb.push(f"Rehashing '{entry.key}': bucket {old_index} → bucket {new_index}",
                table, line=8, active=[new_index], modified=[new_index])

    _reset(table)
    sb.push(f"Resize complete. Capacity: {new_capacity}, load factor: {_load(table)}",
            table, line=8)
    return sb.steps


def generate_clear_steps(data: HashTableData) -> List[Step]:
    table = _clone(data)
    sb = StepBuilder()
    sb.push(f"Clearing {table.size} entries", table, line=1)
    sb.writes += table.size
    table = empty_table(table.capacity)
    sb.push("Table cleared", table, line=1)
    return sb.steps
