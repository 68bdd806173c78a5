"""Order SRV records by priority and weight following RFC 2782.

Records are grouped by ascending priority. Inside a group the order is drawn
by repeated weighted selection, so a record with twice the weight of another
is twice as likely to be tried before it. The random source is always passed
in by the caller.
"""

from __future__ import annotations

import logging
from itertools import groupby
from typing import Iterable, List, Protocol

from .models import Endpoint, SRVRecord

LOGGER = logging.getLogger(__name__)


class RandomSource(Protocol):
    """Minimal interface of ``random.Random`` used for weighted selection."""

    def random(self) -> float:
        """Return a float uniformly drawn from [0.0, 1.0)."""


def _pick_index(pool: List[SRVRecord], rng: RandomSource) -> int:
    """Select one record index from a pool by weighted random choice.

    A pool whose weights are all zero is treated as uniformly weighted.

    Args:
        pool (List[SRVRecord]): Remaining records of one priority group.
        rng (RandomSource): Random source.

    Returns:
        int: Index of the selected record.
    """
    weights = [record.weight for record in pool]
    total = sum(weights)
    if total == 0:
        weights = [1] * len(pool)
        total = len(pool)
    threshold = rng.random() * total
    running = 0
    for index, weight in enumerate(weights):
        running += weight
        if threshold < running:
            return index
    # Only reachable through float rounding at the upper bound.
    return max(index for index, weight in enumerate(weights) if weight > 0)


def shuffle_by_weight(records: Iterable[SRVRecord], rng: RandomSource) -> List[SRVRecord]:
    """Randomly order records of a single priority using their weights.

    Args:
        records (Iterable[SRVRecord]): Records sharing one priority.
        rng (RandomSource): Random source.

    Returns:
        List[SRVRecord]: Records in selection order.
    """
    pool = list(records)
    ordered: List[SRVRecord] = []
    while len(pool) > 1:
        ordered.append(pool.pop(_pick_index(pool, rng)))
    ordered.extend(pool)
    return ordered


def order_by_priority(records: Iterable[SRVRecord], rng: RandomSource) -> List[SRVRecord]:
    """Order records by ascending priority, weighted-random within a priority.

    Args:
        records (Iterable[SRVRecord]): Records to order.
        rng (RandomSource): Random source.

    Returns:
        List[SRVRecord]: Every input record exactly once, grouped by priority.
    """
    by_priority = sorted(records, key=lambda record: record.priority)
    ordered: List[SRVRecord] = []
    for _priority, group in groupby(by_priority, key=lambda record: record.priority):
        ordered.extend(shuffle_by_weight(group, rng))
    return ordered


def order_records(
    records: Iterable[SRVRecord], rng: RandomSource, network: str = "tcp"
) -> List[Endpoint]:
    """Turn SRV records into the ordered candidate list for dialing.

    Args:
        records (Iterable[SRVRecord]): Records to order.
        rng (RandomSource): Random source.
        network (str): Transport network of the resulting endpoints.

    Returns:
        List[Endpoint]: Candidate endpoints in connection order.
    """
    candidates = [
        Endpoint.from_record(record, network) for record in order_by_priority(records, rng)
    ]
    LOGGER.debug("Candidate order: %s", [str(candidate) for candidate in candidates])
    return candidates


__all__ = ["RandomSource", "order_by_priority", "order_records", "shuffle_by_weight"]
