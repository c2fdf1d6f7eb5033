# utils.py
# Helpers: fixed budget split, duration labels, optional timeout wrapper

from __future__ import annotations
import asyncio
from typing import Awaitable, TypeVar

T = TypeVar("T")

# share of the total budget per bucket, sums to 1.0
BUDGET_SPLIT = {
    "accommodation": 0.40,
    "food": 0.30,
    "transportation": 0.15,
    "activities": 0.10,
    "miscellaneous": 0.05,
}


def split_budget(total: float) -> dict[str, float]:
    """Split a total budget into the five breakdown buckets (40/30/15/10/5)."""
    total = float(total)
    return {bucket: total * share for bucket, share in BUDGET_SPLIT.items()}


def duration_label(days: int) -> str:
    return f"{days} days"


async def run_with_timeout(coro: Awaitable[T], seconds: float | None) -> T:
    """
    Await coro, bounded by `seconds` when set.
    Raises asyncio.TimeoutError on expiry; None means no bound.
    """
    if not seconds:
        return await coro
    return await asyncio.wait_for(coro, timeout=seconds)
