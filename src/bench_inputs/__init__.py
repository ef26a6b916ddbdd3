"""Input-driven microbenchmarks with baseline-subtracted throughput."""

from .config import (
    NS_PER_MS as NS_PER_MS,
)
from .config import (
    NS_PER_S as NS_PER_S,
)
from .config import (
    JobConfig as JobConfig,
)
from .job import (
    Job as Job,
)
from .job import (
    inputs as inputs,
)
from .logging import (
    Logger as Logger,
)
from .logging import (
    LoggerConfig as LoggerConfig,
)
from .logging import (
    LogLevel as LogLevel,
)
from .report import (
    Report as Report,
)
from .report import (
    ReportSummary as ReportSummary,
)
from .reporting import (
    ConsoleReporter as ConsoleReporter,
)

__version__ = "0.1.0"

__all__ = [
    # Benchmarking
    "Job",
    "JobConfig",
    "inputs",
    "Report",
    "ReportSummary",
    "ConsoleReporter",
    # Constants
    "NS_PER_S",
    "NS_PER_MS",
    # Logging
    "Logger",
    "LoggerConfig",
    "LogLevel",
]
