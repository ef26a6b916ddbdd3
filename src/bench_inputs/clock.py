from time import (
    localtime,
    perf_counter_ns,
    strftime,
    time as time_sec,
)


def monotonic_ns() -> int:
    """
    Get a monotonic, high-resolution timestamp in nanoseconds.

    Only the difference between two readings is meaningful.

    Returns
    -------
    int
        The current reading of the performance counter.
    """
    return perf_counter_ns()


def time_s() -> float:
    """
    Get the current time in seconds since the epoch.

    Returns
    -------
    float
        The current time in seconds.
    """
    return time_sec()


def time_ms() -> float:
    """
    Get the current time in milliseconds since the epoch.

    Returns
    -------
    float
        The current time in milliseconds.
    """
    return time_sec() * 1_000.0


def datetime_now() -> str:
    """
    Get the current time in the format 'YYYY-MM-DD HH:MM:SS.mmm'.

    Returns
    -------
    str
        The current time string.
    """
    now = time_sec()
    millis = int(now * 1_000.0) % 1_000
    return strftime("%Y-%m-%d %H:%M:%S", localtime(now)) + f".{millis:03d}"
