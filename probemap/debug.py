from typing import Any

from .shared import printf
from .table import NotFound, Table


def print_table(table: Table, name: str):
    printf("== {0:s} ({1:d}/{2:d}) ==\n", name, table.count, table.capacity)

    for index, line in enumerate(table.dump()):
        printf("{0:04d} {1:s}\n", index, line)


def trace_probe(table: Table, key: Any) -> int | NotFound:
    """Print every slot visited while looking up ``key``.

    Walks the same probe sequence as ``Table.find_slot`` and returns the
    same result, so the listing always agrees with a real lookup.
    """
    printf("== probe {0!r} ==\n", key)

    for index in table.probe_sequence(key):
        slot = table.slots[index]
        if not slot.occupied:
            printf("{0:04d} x  empty\n", index)
            return NotFound()
        if slot.key == key:
            printf("{0:04d} {1!r} -> {2!r}  match\n", index, slot.key, slot.value)
            return index
        printf("{0:04d} {1!r}  skip\n", index, slot.key)

    printf("exhausted after {0:d} slots\n", table.capacity)
    return NotFound()
