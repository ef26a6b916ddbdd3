"""Report formatting utilities.

Renders single reports and ranked comparisons as plain text.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .report import Report


class ConsoleReporter:
    """Writes benchmark reports and comparisons to a text stream.

    Args:
        out: Stream to write to. When None, the current ``sys.stdout`` is
            looked up on every write, so redirections made after construction
            are honoured.
    """

    def __init__(self, out: TextIO | None = None) -> None:
        self._out = out

    @property
    def out(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    def print_report(self, report: Report) -> None:
        """Print a report's label followed by its throughput and spread."""
        out = self.out
        print(report.label, file=out)
        print(
            f"  {report.ips:.1f} i/s (±{report.relative_stddev:.2f}%)",
            file=out,
        )

    def print_nothing_to_compare(self) -> None:
        print("Nothing to compare!", file=self.out)

    def print_comparison(self, reports: Sequence[Report]) -> None:
        """Print ranked reports, fastest first.

        Args:
            reports: Reports already sorted and annotated by ``Job.compare``.
        """
        out = self.out
        width = max(len(r.label) for r in reports)

        print("\nComparison:", file=out)
        for i, report in enumerate(reports):
            line = f"  {report.label:>{width}}:  {report.ips:10.1f} i/s"
            if report.ratio is not None:
                line += f" - {report.ratio:.2f}x slower"
            elif i > 0:
                line += " - same-ish: difference falls within error"
            print(line, file=out)
        print(file=out)
