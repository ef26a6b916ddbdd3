"""Streaming throughput statistics for a single benchmarked operation."""

from __future__ import annotations

import math

from msgspec import Struct

from bench_inputs.config import NS_PER_S


class ReportSummary(Struct, frozen=True):
    """Snapshot of a report's statistics.

    Args:
        label: Report label.
        ips: Mean invocations per second.
        stddev: Sample standard deviation of ``ips``.
        relative_stddev: ``stddev`` as a percentage of ``ips``.
        samples: Number of samples aggregated.
        invocations_per_sample: Invocations represented by one sample.
        ratio: Slowdown relative to the fastest report, if significant.
    """

    label: str
    ips: float
    stddev: float
    relative_stddev: float
    samples: int
    invocations_per_sample: float
    ratio: float | None = None


class Report:
    """Throughput accumulator and ranking record for one operation.

    Samples are folded into a running mean and sum of squared deviations
    (Welford's online algorithm) as they arrive; raw samples are not kept.

    Args:
        label: Label for the report.
        invocations_per_sample: How many operation invocations one timed
            sample represents (repetitions times number of inputs).
    """

    def __init__(self, label: object, invocations_per_sample: float) -> None:
        if invocations_per_sample <= 0:
            raise ValueError(
                f"Invalid invocations_per_sample; expected >0 but got {invocations_per_sample}"
            )
        self._label = str(label)
        self._invocations_per_sample = float(invocations_per_sample)
        self._ratio: float | None = None

        self._n = 0
        self._mean = 0.0
        self._m2 = 0.0
        self._stddev: float | None = None

    @property
    def label(self) -> str:
        """The label for the report."""
        return self._label

    @property
    def invocations_per_sample(self) -> float:
        """Operation invocations represented by one sample."""
        return self._invocations_per_sample

    @property
    def ratio(self) -> float | None:
        """Ratio of the fastest report's ips to this report's ips.

        None if this report is the fastest, if the difference falls within
        the combined measurement error, or if no comparison has been made.
        Set by ``Job.compare``.
        """
        return self._ratio

    @property
    def n(self) -> int:
        """Number of samples aggregated so far."""
        return self._n

    def add_sample(self, time_ns: float) -> None:
        """Fold one timed sample into the running statistics.

        Args:
            time_ns: Duration of the sample in nanoseconds.

        Raises:
            ValueError: If ``time_ns`` is not positive.
        """
        if not time_ns > 0:
            raise ValueError(f"Invalid sample duration; expected >0 but got {time_ns}")

        sample_ips = self._invocations_per_sample * NS_PER_S / time_ns

        # see https://en.wikipedia.org/wiki/Algorithms_for_calculating_variance#Welford's_online_algorithm
        # or Knuth's TAOCP vol 2, 3rd edition, page 232
        self._n += 1
        delta = sample_ips - self._mean
        self._mean += delta / self._n
        self._m2 += delta * (sample_ips - self._mean)
        self._stddev = None

    @property
    def ips(self) -> float:
        """Estimated invocations per second."""
        return self._mean

    @property
    def stddev(self) -> float:
        """Sample standard deviation of ``ips`` (0.0 with fewer than 2 samples)."""
        if self._stddev is None:
            self._stddev = 0.0 if self._n < 2 else math.sqrt(self._m2 / (self._n - 1))
        return self._stddev

    @property
    def relative_stddev(self) -> float:
        """``stddev`` as a percentage of ``ips``."""
        if self._mean == 0.0:
            return 0.0
        return self.stddev / self._mean * 100.0

    def slower_than(self, faster: Report) -> float | None:
        """Set and return ``ratio`` relative to ``faster``."""
        self._ratio = None if self.overlaps(faster) else faster.ips / self.ips
        return self._ratio

    def overlaps(self, faster: Report) -> bool:
        """Whether the one-stddev intervals of ``faster`` and this report meet."""
        return (faster.ips - faster.stddev) <= (self.ips + self.stddev)

    def summary(self) -> ReportSummary:
        """Return an immutable snapshot of the current statistics."""
        return ReportSummary(
            label=self._label,
            ips=self.ips,
            stddev=self.stddev,
            relative_stddev=self.relative_stddev,
            samples=self._n,
            invocations_per_sample=self._invocations_per_sample,
            ratio=self._ratio,
        )

    def __repr__(self) -> str:
        return (
            f"Report(label={self._label!r}, ips={self.ips:.1f}, "
            f"stddev={self.stddev:.1f}, n={self._n}, ratio={self._ratio!r})"
        )
