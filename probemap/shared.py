import sys
from typing import Any


def printf(format: str, *args: Any):
    print(format.format(*args), end="")


def printf_err(format: str, *args: Any):
    print(format.format(*args), end="", file=sys.stderr)


def format_seconds(seconds: float) -> str:
    if seconds < 1e-3:
        return "{0:.2f} us".format(seconds * 1e6)
    if seconds < 1:
        return "{0:.2f} ms".format(seconds * 1e3)
    return "{0:.2f} s".format(seconds)
