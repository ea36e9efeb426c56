"""
Candidate Enumeration
=====================
Odometer over the Cartesian product ``[0, limit]^n``.

The first variable is the slowest-changing digit, so candidates come out in
lexicographic order over the declaration order. One dict is mutated in place
and yielded for every candidate; callers that keep a candidate must copy it.
"""
from typing import Dict, Hashable, Iterator, List, Optional, Sequence, TypeVar

K = TypeVar("K", bound=Hashable)


def iterate_every_combination(
    variables: Sequence[K],
    limit: int,
    buffer: Optional[Dict[K, int]] = None,
    first_values: Optional[range] = None,
) -> Iterator[Dict[K, int]]:
    """
    Yield every assignment of ``variables`` to integers in ``[0, limit]``.

    Args:
        variables: Variables in enumeration order
        limit: Inclusive upper bound of every variable
        buffer: Dict to mutate and yield (a new one if None)
        first_values: Restrict the first variable to this contiguous
            sub-range of ``range(limit + 1)`` (used to partition the search)

    Yields:
        The same mutable dict, updated in place for each candidate. With no
        variables a single empty assignment is yielded.
    """
    if limit < 0:
        raise ValueError(f"limit must be >= 0, got {limit}")
    values: Dict[K, int] = {} if buffer is None else buffer
    n = len(variables)
    if n == 0:
        yield values
        return

    top = range(limit + 1) if first_values is None else first_values
    if len(top) == 0:
        return
    if top.step != 1 or top.start < 0 or top.stop > limit + 1:
        raise ValueError(f"first_values must be a contiguous sub-range of [0, {limit}], got {top}")

    digits: List[int] = [0] * n
    digits[0] = top.start
    for var, digit in zip(variables, digits):
        values[var] = digit

    while True:
        yield values

        i = n - 1
        while i >= 0:
            upper = top.stop - 1 if i == 0 else limit
            if digits[i] < upper:
                digits[i] += 1
                values[variables[i]] = digits[i]
                break
            digits[i] = 0
            values[variables[i]] = 0
            i -= 1
        if i < 0:
            return


def partition(limit: int, parts: int) -> List[range]:
    """Split ``range(limit + 1)`` into at most ``parts`` contiguous, non-empty chunks."""
    size = limit + 1
    parts = max(1, min(parts, size))
    base, extra = divmod(size, parts)
    chunks = []
    start = 0
    for i in range(parts):
        stop = start + base + (1 if i < extra else 0)
        chunks.append(range(start, stop))
        start = stop
    return chunks
