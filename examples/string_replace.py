"""Compare non-destructive and destructive string/list operations.

Usage:
    python examples/string_replace.py
"""

import re

from bench_inputs import inputs

WORDS = ["abc", "aaa", "xyz", ""]
TABLE = str.maketrans("a", "A")
PATTERN = re.compile("a")


def main() -> None:
    with inputs(WORDS) as job:
        job.report("str.replace", lambda s: s.replace("a", "A"))
        job.report("str.translate", lambda s: s.translate(TABLE))
        job.report("re.sub", lambda s: PATTERN.sub("A", s))
        job.compare()

    # list.sort mutates its argument, so every invocation gets a fresh copy.
    lists = [[3, 1, 2], list(range(50, 0, -1)), []]
    with inputs(lists, dup_inputs=True) as job:
        job.report("list.sort", lambda xs: xs.sort())
        job.report("list.reverse", lambda xs: xs.reverse())
        job.compare()


if __name__ == "__main__":
    main()
