"""Specialized timing routines.

A timing routine runs an operation against every input value a given number
of times and returns the elapsed nanoseconds. To keep container traversal and
indexing out of the measured loop, the routine is generated for the exact
number of inputs: each input is bound to its own local variable before the
first clock reading, and the loop body calls the operation once per variable.
"""

from __future__ import annotations

import copy
import itertools
from collections.abc import Callable, Sequence
from typing import Any

from bench_inputs.clock import monotonic_ns

TimingRoutine = Callable[[int, Callable[[Any], Any]], int]

_ROUTINE_TEMPLATE = """
def bench(reps, op, _clock=_clock, _repeat=_repeat, _dup=_dup):
    {assigns}
    before_ns = _clock()
    for _ in _repeat(None, reps):
        {calls}
    after_ns = _clock()
    return after_ns - before_ns
"""


def routine_source(num_inputs: int, dup_inputs: bool) -> str:
    """Return the source of a timing routine for ``num_inputs`` input slots."""
    if num_inputs <= 0:
        raise ValueError(
            f"Invalid number of inputs; expected >0 but got {num_inputs}"
        )

    assigns = "; ".join(f"x{i} = _inputs[{i}]" for i in range(num_inputs))
    if dup_inputs:
        calls = "; ".join(f"op(_dup(x{i}))" for i in range(num_inputs))
    else:
        calls = "; ".join(f"op(x{i})" for i in range(num_inputs))

    return _ROUTINE_TEMPLATE.format(assigns=assigns, calls=calls)


def build_routine(
    inputs: Sequence[Any],
    dup_inputs: bool = False,
    clock: Callable[[], int] = monotonic_ns,
    dup: Callable[[Any], Any] = copy.copy,
) -> TimingRoutine:
    """Compile a timing routine specialized for ``inputs``.

    Args:
        inputs: Input values, bound to the routine's local slots in order.
        dup_inputs: If True, every delivery of an input value goes through
            ``dup`` first so the operation may mutate its argument freely.
        clock: Nanosecond timestamp source read before and after the loop.
        dup: Copy function used when ``dup_inputs`` is set.

    Returns:
        A callable ``bench(reps, op) -> elapsed_ns``.
    """
    source = routine_source(len(inputs), dup_inputs)
    namespace: dict[str, Any] = {
        "_inputs": tuple(inputs),
        "_clock": clock,
        "_repeat": itertools.repeat,
        "_dup": dup,
    }
    code = compile(source, f"<bench_inputs routine x{len(inputs)}>", "exec")
    exec(code, namespace)
    return namespace["bench"]
