"""Configuration and shared constants for benchmark jobs."""

from typing import Self

from msgspec import Struct

NS_PER_S = 1_000_000_000
NS_PER_MS = NS_PER_S // 1_000


class JobConfig(Struct):
    """Sampling configuration for a benchmark job.

    Args:
        dup_inputs: Whether each input is shallow-copied before every
            invocation of a benchmarked operation.
        sample_n: Number of timed samples taken per operation.
        sample_dt: Approximate duration (in nanoseconds) each sample
            should span.
        max_sample_retries: How many times a sample whose baseline-subtracted
            duration is not positive may be retaken before giving up.
    """

    dup_inputs: bool = False
    sample_n: int = 10
    sample_dt: int = NS_PER_MS * 200
    max_sample_retries: int = 10

    def __post_init__(self) -> None:
        """Validate sampling parameters."""
        if self.sample_n <= 0:
            raise ValueError(
                f"Invalid sample_n; expected >0 but got {self.sample_n}"
            )
        if self.sample_dt <= 0:
            raise ValueError(
                f"Invalid sample_dt; expected >0 but got {self.sample_dt}"
            )
        if self.max_sample_retries < 0:
            raise ValueError(
                f"Invalid max_sample_retries; expected >=0 but got {self.max_sample_retries}"
            )

    @classmethod
    def default(cls) -> Self:
        """Return 10 samples of ~200ms each, without input duplication."""
        return cls(
            dup_inputs=False,
            sample_n=10,
            sample_dt=NS_PER_MS * 200,
            max_sample_retries=10,
        )
