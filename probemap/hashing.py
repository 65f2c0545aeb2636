from typing import Any, Protocol, runtime_checkable


WORD_MASK = 2**64 - 1
DJB2_SEED = 5381


@runtime_checkable
class Hashable(Protocol):
    def hash(self) -> int:
        ...


def hash_bytes(data: bytes) -> int:
    result = DJB2_SEED
    for byte in data:
        result = ((result << 5) + result + byte) & WORD_MASK
    return result


def hash_string(key: str) -> int:
    return hash_bytes(key.encode("utf-8"))


def hash_int(key: int) -> int:
    if key < 0:
        raise TypeError(f"integer keys must be unsigned, got {key}")
    return key


def hash_key(key: Any) -> int:
    """Hash a key according to the table's hashing contract.

    Strings and bytes use DJB2 with 64-bit wraparound, unsigned integers
    hash to themselves, and anything else must provide a ``hash()`` method.
    """
    match key:
        case bool():
            raise TypeError("bool is not a valid key type")
        case int():
            return hash_int(key)
        case str():
            return hash_string(key)
        case bytes():
            return hash_bytes(key)
        case Hashable():
            result = key.hash()
            if not isinstance(result, int) or result < 0:
                raise TypeError(
                    f"{type(key).__name__}.hash() must return an unsigned int"
                )
            return result

    raise TypeError(f"unhashable key type: {type(key).__name__}")
