from dataclasses import dataclass, field
from typing import Generic, Iterator, TypeVar

from .hashing import hash_key
from .shared import printf


K = TypeVar("K")
V = TypeVar("V")


INITIAL_CAPACITY = 11


_debug_trace_rebuild = False


def set_debug_trace_rebuild(b: bool):
    global _debug_trace_rebuild
    _debug_trace_rebuild = b


@dataclass(frozen=True)
class NotFound:
    pass


@dataclass
class Slot(Generic[K, V]):
    key: K | None
    value: V | None
    occupied: bool

    @classmethod
    def empty(cls) -> "Slot[K, V]":
        return Slot(None, None, False)


@dataclass
class ValueRef(Generic[K, V]):
    """Write-through handle to the value of one occupied slot.

    Only valid until the table rebuilds; after that the slot it points to
    belongs to a discarded backing list.
    """

    table: "Table[K, V]" = field(repr=False, compare=False)
    slot: Slot[K, V]
    generation: int

    def _slot(self) -> Slot[K, V]:
        if self.generation != self.table.generation:
            raise AssertionError("stale value handle")
        return self.slot

    @property
    def key(self) -> K:
        return self._slot().key  # type: ignore[return-value]

    @property
    def value(self) -> V:
        return self._slot().value  # type: ignore[return-value]

    @value.setter
    def value(self, value: V) -> None:
        self._slot().value = value


@dataclass
class Table(Generic[K, V]):
    count: int
    slots: list[Slot[K, V]]
    generation: int

    def __init__(self, capacity: int = INITIAL_CAPACITY) -> None:
        assert capacity > 0, capacity
        self.count = 0
        self.slots = [Slot.empty() for _ in range(capacity)]
        self.generation = 0

    @property
    def capacity(self) -> int:
        return len(self.slots)

    def __len__(self) -> int:
        return self.count

    def __contains__(self, key: K) -> bool:
        return not isinstance(self.find_slot(key), NotFound)

    def insert(self, key: K, value: V) -> bool:
        """Insert or update; returns True when ``key`` was not present."""
        index = self.find_slot(key)
        if not isinstance(index, NotFound):
            self.slots[index].value = value
            return False

        if self.count >= len(self.slots):
            self._rebuild()

        assert self.count < len(self.slots)

        index = hash_key(key) % len(self.slots)
        while self.slots[index].occupied:
            index = (index + 1) % len(self.slots)

        slot = self.slots[index]
        slot.key = key
        slot.value = value
        slot.occupied = True
        self.count += 1
        return True

    def lookup(self, key: K) -> V | NotFound:
        index = self.find_slot(key)
        if isinstance(index, NotFound):
            return index
        return self.slots[index].value  # type: ignore[return-value]

    def lookup_mut(self, key: K) -> ValueRef[K, V] | NotFound:
        index = self.find_slot(key)
        if isinstance(index, NotFound):
            return index
        return ValueRef(self, self.slots[index], self.generation)

    def find_slot(self, key: K) -> int | NotFound:
        for index in self.probe_sequence(key):
            slot = self.slots[index]
            if not slot.occupied:
                break
            if slot.key == key:
                return index
        return NotFound()

    def probe_sequence(self, key: K) -> Iterator[int]:
        # never more than capacity slots, so a full table still terminates
        capacity = len(self.slots)
        start = hash_key(key) % capacity
        for i in range(capacity):
            yield (start + i) % capacity

    def items(self) -> Iterator[tuple[K, V]]:
        for slot in self.slots:
            if slot.occupied:
                yield slot.key, slot.value  # type: ignore[misc]

    def dump(self) -> list[str]:
        lines = []
        for slot in self.slots:
            if slot.occupied:
                lines.append(f"{slot.key!r} -> {slot.value!r}")
            else:
                lines.append("x")
        return lines

    def _rebuild(self):
        assert len(self.slots) != 0
        assert self.count <= len(self.slots), (self.count, len(self.slots))

        new_table: Table[K, V] = Table(len(self.slots) * 2 + 1)
        for key, value in self.items():
            new_table.insert(key, value)

        if _debug_trace_rebuild:
            printf(
                "rebuild {0:d} -> {1:d} ({2:d} entries)\n",
                len(self.slots),
                len(new_table.slots),
                new_table.count,
            )

        self.slots = new_table.slots
        self.count = new_table.count
        self.generation += 1
