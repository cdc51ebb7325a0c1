"""Random selection of unique product indices."""

import random

from .errors import PreconditionError


def select_unique(pool_size: int, count: int, rng: random.Random | None = None) -> list[int]:
    """
    Pick ``count`` distinct indices from ``range(pool_size)``.

    Draws uniformly and rejects repeats until enough values are held, so the
    result is in acceptance order rather than sorted.

    Args:
        pool_size: Number of items available
        count: How many unique indices to return
        rng: Optional random source, defaults to the module-level generator

    Returns:
        List of unique indices, length ``count``

    Raises:
        PreconditionError: If either argument is negative or ``count > pool_size``
    """
    if pool_size < 0 or count < 0:
        raise PreconditionError(
            f"pool_size and count must be non-negative (got pool_size={pool_size}, count={count})"
        )
    if count > pool_size:
        raise PreconditionError(
            f"cannot select {count} unique items from a pool of {pool_size}"
        )

    rng = rng or random
    selected: list[int] = []
    seen: set[int] = set()

    while len(selected) < count:
        index = rng.randrange(pool_size)
        if index not in seen:
            seen.add(index)
            selected.append(index)

    return selected
