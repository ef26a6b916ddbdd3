"""Exports of report statistics for downstream analysis."""

from __future__ import annotations

from collections.abc import Iterable

import msgspec
import numpy as np
from numpy.typing import NDArray

from bench_inputs.report import Report, ReportSummary

REPORT_DTYPE = np.dtype(
    [
        ("label", object),
        ("ips", np.float64),
        ("stddev", np.float64),
        ("relative_stddev", np.float64),
        ("samples", np.int64),
        ("invocations_per_sample", np.float64),
        ("ratio", np.float64),
    ]
)

_json_encode = msgspec.json.Encoder().encode
_json_decode = msgspec.json.Decoder(list[ReportSummary]).decode


def summarize(reports: Iterable[Report]) -> list[ReportSummary]:
    """Snapshot every report, preserving order."""
    return [report.summary() for report in reports]


def reports_to_json(reports: Iterable[Report]) -> bytes:
    """Encode report summaries as a JSON array."""
    return _json_encode(summarize(reports))


def summaries_from_json(data: bytes | str) -> list[ReportSummary]:
    """Decode the output of ``reports_to_json``."""
    return _json_decode(data)


def reports_to_array(reports: Iterable[Report]) -> NDArray:
    """Return report statistics as a structured array, one row per report.

    Unset ratios (fastest report, or no significant difference) are NaN.
    """
    rows = [
        (
            s.label,
            s.ips,
            s.stddev,
            s.relative_stddev,
            s.samples,
            s.invocations_per_sample,
            np.nan if s.ratio is None else s.ratio,
        )
        for s in summarize(reports)
    ]
    return np.array(rows, dtype=REPORT_DTYPE)
