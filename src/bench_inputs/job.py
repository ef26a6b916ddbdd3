"""Benchmark jobs over a fixed set of input values."""

from __future__ import annotations

import gc
import math
from collections.abc import Callable, Iterable, Iterator
from contextlib import contextmanager
from typing import Any, TextIO

import msgspec
from numpy.typing import NDArray

from bench_inputs.config import JobConfig
from bench_inputs.export import reports_to_array, reports_to_json, summarize
from bench_inputs.logging import Logger, LoggerConfig, LogLevel
from bench_inputs.report import Report, ReportSummary
from bench_inputs.reporting import ConsoleReporter
from bench_inputs.timing import TimingRoutine, build_routine


def _identity(x: Any) -> Any:
    return x


class Job:
    """Benchmark runner over a fixed, ordered list of input values.

    Every operation registered with ``report`` is invoked once per input per
    repetition. Each sample times the operation and, separately, an identity
    operation through the same routine; the difference is what gets recorded,
    so loop, call and copy overhead cancel out.

    Args:
        inputs: Input values passed to each benchmarked operation.
        dup_inputs: Whether input values are shallow-copied before each
            invocation. Set this when operations mutate their argument.
            Defaults to False.
        sample_n: Number of samples to take per operation. Defaults to 10.
        sample_dt: Approximate duration (in nanoseconds) of each sample.
            Defaults to 200ms.
        config: Base configuration. Any of the three keywords above that
            are given replace the matching field.
        out: Text stream for report and comparison output (default: stdout).
        logger: Logger for diagnostics. A silent WARNING-level logger is
            created if omitted.

    Raises:
        ValueError: If ``inputs`` is empty or the configuration is invalid.
    """

    def __init__(
        self,
        inputs: Iterable[Any],
        *,
        dup_inputs: bool | None = None,
        sample_n: int | None = None,
        sample_dt: int | None = None,
        config: JobConfig | None = None,
        out: TextIO | None = None,
        logger: Logger | None = None,
    ) -> None:
        inputs = tuple(inputs)
        if not inputs:
            raise ValueError("No inputs specified")

        self._config = config if config is not None else JobConfig.default()
        overrides = {
            name: value
            for name, value in (
                ("dup_inputs", dup_inputs),
                ("sample_n", sample_n),
                ("sample_dt", sample_dt),
            )
            if value is not None
        }
        if overrides:
            self._config = self._replace_config(**overrides)

        self._inputs = inputs
        self._reports: list[Report] = []
        self._reporter = ConsoleReporter(out)
        self._logger = logger or Logger(
            name="bench_inputs.job",
            config=LoggerConfig(base_level=LogLevel.WARNING),
        )
        self._bench: TimingRoutine = self._build_bench()

    def _replace_config(self, **changes: Any) -> JobConfig:
        # Rebuilt through __init__ so __post_init__ validates the result.
        return JobConfig(**(msgspec.structs.asdict(self._config) | changes))

    def _build_bench(self) -> TimingRoutine:
        return build_routine(self._inputs, self._config.dup_inputs)

    @property
    def inputs(self) -> tuple[Any, ...]:
        """The input values, in the order they are passed to operations."""
        return self._inputs

    @property
    def config(self) -> JobConfig:
        return self._config

    @property
    def dup_inputs(self) -> bool:
        """Whether input values are copied before each invocation.

        Defaults to False. Should be set to True if benchmarked operations
        destructively modify their arguments.
        """
        return self._config.dup_inputs

    @dup_inputs.setter
    def dup_inputs(self, flag: bool) -> None:
        self._config = self._replace_config(dup_inputs=bool(flag))
        self._bench = self._build_bench()

    @property
    def sample_n(self) -> int:
        """The number of samples to take per operation. Defaults to 10."""
        return self._config.sample_n

    @sample_n.setter
    def sample_n(self, n: int) -> None:
        self._config = self._replace_config(sample_n=n)

    @property
    def sample_dt(self) -> int:
        """Approximate duration (in nanoseconds) of each sample.

        Defaults to 200,000,000 (200 milliseconds).
        """
        return self._config.sample_dt

    @sample_dt.setter
    def sample_dt(self, dt: int) -> None:
        self._config = self._replace_config(sample_dt=dt)

    @property
    def reports(self) -> list[Report]:
        """Reports in registration order, or ranked order after ``compare``."""
        return self._reports

    @property
    def logger(self) -> Logger:
        return self._logger

    def time(self, reps: int, operation: Callable[[Any], Any]) -> int:
        """Run ``reps`` passes of ``operation`` over all inputs; return elapsed ns."""
        return self._bench(reps, operation)

    def estimate_reps(self, operation: Callable[[Any], Any]) -> int:
        """Find a repetition count whose timing is on the order of ``sample_dt``.

        Doubles the repetition count until one trial takes at least
        ``sample_dt``, then scales the last timed count by the ratio of that
        trial's duration to ``sample_dt``.
        """
        sample_dt = self._config.sample_dt
        reps = 1
        reps_time = 0
        while reps_time < sample_dt:
            reps_time = self._bench(reps, operation)
            self._logger.trace(f"estimate: {reps} reps took {reps_time} ns")
            reps *= 2
        reps = math.ceil((reps // 2) * (reps_time / sample_dt))
        self._logger.debug(f"estimate: using {reps} reps per sample")
        return reps

    def _take_sample(self, label: str, reps: int, operation: Callable[[Any], Any]) -> int:
        """Return one positive baseline-subtracted duration, retrying degenerate ones."""
        retries = self._config.max_sample_retries
        attempt = 0
        while True:
            elapsed = self._bench(reps, operation) - self._bench(reps, _identity)
            if elapsed > 0:
                return elapsed
            if attempt >= retries:
                raise RuntimeError(
                    f"Unable to measure {label!r}; baseline-subtracted duration "
                    f"was not positive after {retries} retries (last: {elapsed} ns)"
                )
            attempt += 1
            self._logger.warning(
                f"{label}: discarding sample with non-positive duration "
                f"({elapsed} ns), retry {attempt}/{retries}"
            )

    def report(self, label: object, operation: Callable[[Any], Any]) -> Report:
        """Benchmark ``operation`` against the inputs and record a Report.

        If ``dup_inputs`` is set, each input value is copied before being
        passed to ``operation``. The label and throughput are printed to the
        output stream, and the Report is appended to ``reports``.

        Args:
            label: Label for the benchmark.
            operation: Callable taking one input value.

        Returns:
            The new Report.

        Raises:
            RuntimeError: If no positive sample duration could be measured.
        """
        reps = self.estimate_reps(operation)

        report = Report(label, reps * len(self._inputs))
        gc.collect()
        for _ in range(self._config.sample_n):
            report.add_sample(self._take_sample(report.label, reps, operation))

        self._logger.info(
            f"{report.label}: {report.ips:.1f} i/s over {report.n} samples of {reps} reps"
        )
        self._reporter.print_report(report)
        self._reports.append(report)
        return report

    def compare(self) -> None:
        """Rank reports fastest first and print their relative speeds.

        Sorting is stable and done in place, so ``reports`` stays ranked
        afterwards. Each report's ``ratio`` is recomputed against the fastest.
        """
        if not self._reports:
            self._reporter.print_nothing_to_compare()
            return

        self._reports.sort(key=lambda r: -r.ips)
        fastest = self._reports[0]
        for report in self._reports:
            report.slower_than(fastest)

        self._reporter.print_comparison(self._reports)

    def summaries(self) -> list[ReportSummary]:
        """Snapshot of every report in the current order."""
        return summarize(self._reports)

    def to_json(self) -> bytes:
        """Report summaries encoded as a JSON array."""
        return reports_to_json(self._reports)

    def to_array(self) -> NDArray:
        """Report statistics as a numpy structured array."""
        return reports_to_array(self._reports)


@contextmanager
def inputs(values: Iterable[Any], **options: Any) -> Iterator[Job]:
    """Create a Job for ``values`` and yield it for configuration and runs.

    The job's logger is flushed when the block exits.

    Example:
        >>> table = str.maketrans("a", "A")
        >>> with inputs(["abc", "aaa", "xyz", ""]) as job:
        ...     job.report("str.replace", lambda s: s.replace("a", "A"))
        ...     job.report("str.translate", lambda s: s.translate(table))
        ...     job.compare()

    Args:
        values: Input values to pass to each benchmarked operation.
        **options: Keyword arguments for ``Job``.

    Raises:
        ValueError: If ``values`` is empty.
    """
    job = Job(values, **options)
    try:
        yield job
    finally:
        job.logger.flush()
