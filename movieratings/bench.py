"""Headless load test: hammer the service with random operations and time them."""

import logging
import random
import time
from typing import Callable

from .config import MIN_RATING, MAX_RATING
from .service import CatalogService

logger = logging.getLogger(__name__)


def run_bench(service: CatalogService, n: int, seed: int | None = None,
              echo: Callable[[str], None] = print) -> dict:
    """Run `n` calls of each read/write operation against random movie ids.

    Mutates the in-memory catalog (ratings are added) but never saves it.
    Returns {operation: {"success", "errors", "seconds"}}.
    """
    ids = [entry.id for entry in service.store.all()]
    if not ids:
        raise ValueError("Catalog is empty; add some movies before benchmarking.")

    rng = random.Random(seed)
    phases = [
        ("add_rating", lambda: service.add_rating(
            rng.choice(ids), rng.randint(MIN_RATING, MAX_RATING), headless=True)),
        ("get_average", lambda: service.get_average(rng.choice(ids), headless=True)),
        ("get_all_ratings", lambda: service.get_all_ratings(rng.choice(ids), headless=True)),
        ("get_top_rated", lambda: service.get_top_rated(headless=True)),
    ]

    stats = {}
    total_start = time.perf_counter()
    for name, call in phases:
        ok = 0
        failed = 0
        start = time.perf_counter()
        for _ in range(n):
            result = call()
            if result.ok:
                ok += 1
            else:
                failed += 1
                logger.debug(f"{name}: {result.message}")
        elapsed = time.perf_counter() - start
        stats[name] = {"success": ok, "errors": failed, "seconds": elapsed}
        echo(f"  {name}: {ok} ok, {failed} errors in {elapsed:.3f}s")

    echo(f"\nTotal: {time.perf_counter() - total_start:.3f}s for {n * len(phases)} operations")
    return stats
