"""Precondition checks shared by every pair sampling strategy."""

from __future__ import annotations

import operator
import sys
from typing import Any

from pair_sampler.exceptions import PreconditionViolation

# Smallest domain that still leaves a valid pair once one pair is forbidden.
MIN_LENGTH = 3

# Largest domain the random sources can index (C ssize_t / int64).
MAX_LENGTH = sys.maxsize


def _as_index(value: Any, what: str) -> int:
    try:
        return operator.index(value)
    except TypeError:
        raise PreconditionViolation(f"{what} must be an integer, got {value!r}") from None


def validate_inputs(length: Any, deny: Any) -> tuple[int, tuple[int, int]]:
    """Check the domain size and forbidden pair before sampling.

    Checks run in a fixed order: domain size (at least ``MIN_LENGTH``,
    at most ``MAX_LENGTH``), distinctness, then containment of each
    forbidden index in ``range(0, length)``.

    Args:
        length: Number of indexable positions.
        deny: The forbidden pair ``(a, b)``, compared as an unordered set.

    Returns:
        The normalised ``(length, (a, b))`` as plain ints.

    Raises:
        PreconditionViolation: If any precondition does not hold.
    """
    length = _as_index(length, "length")
    try:
        deny_a, deny_b = deny
    except (TypeError, ValueError):
        raise PreconditionViolation(
            f"denied indices must be a pair of integers, got {deny!r}"
        ) from None
    deny_a = _as_index(deny_a, "denied index")
    deny_b = _as_index(deny_b, "denied index")

    if length < MIN_LENGTH:
        raise PreconditionViolation("not enough indices to pick from")
    if length > MAX_LENGTH:
        raise PreconditionViolation(f"too many indices to pick from (maximum {MAX_LENGTH})")
    if deny_a == deny_b:
        raise PreconditionViolation("denied indices must be distinct")
    domain = range(0, length)
    if deny_a not in domain or deny_b not in domain:
        raise PreconditionViolation(
            f"tuple {(deny_a, deny_b)!r} is not fully contained in range {domain!r}"
        )
    return length, (deny_a, deny_b)
