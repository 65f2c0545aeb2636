import sys

from .bench import bench, format_result, load_table
from .debug import print_table
from .shared import printf, printf_err
from .table import Table


USAGE = "Usage: probemap [random|sequential|bench] [n]\n"

DEFAULT_COUNTS = {
    "random": 1000,
    "sequential": 11,
    "bench": 100,
}


def run_random(n: int):
    table = load_table(n)
    print_table(table, "random")


def run_sequential(n: int):
    table: Table[str, str] = Table()
    for i in range(n):
        table.insert(str(i), str(1000000 + i))
    print_table(table, "sequential")


def run_bench(iterations: int):
    result = bench("map", lambda: load_table(1000), iterations)
    printf("{0:s}\n", format_result(result))


def usage():
    printf_err(USAGE)
    sys.exit(64)


def main(argv: list[str] | None = None):
    if argv is None:
        argv = sys.argv[1:]

    if len(argv) > 2:
        usage()

    mode = argv[0] if argv else "random"
    if mode not in DEFAULT_COUNTS:
        usage()

    n = DEFAULT_COUNTS[mode]
    if len(argv) == 2:
        try:
            n = int(argv[1])
        except ValueError:
            usage()
        if n <= 0:
            usage()

    match mode:
        case "random":
            run_random(n)
        case "sequential":
            run_sequential(n)
        case "bench":
            run_bench(n)


if __name__ == "__main__":
    main()
