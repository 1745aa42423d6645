#!/usr/bin/env python3
"""Throughput benchmark for every registered indicator."""

import random
import sys
import time
from pathlib import Path
from typing import Any

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from ta_stream.data.models import Quote
from ta_stream.indicators.registry import available_indicators, create_indicator

ITEMS_COUNT = 5_000


def random_quote(rng: random.Random) -> Quote:
    """Random quote that always satisfies the OHLC invariants."""
    low = rng.uniform(0.0, 500.0)
    high = rng.uniform(500.0, 1000.0)
    return (Quote.builder()
            .open(rng.uniform(low, high))
            .high(high)
            .low(low)
            .close(rng.uniform(low, high))
            .volume(rng.uniform(0.0, 10_000.0))
            .build())


def benchmark_indicator(name: str, quotes: list[Quote]) -> dict[str, Any]:
    """Time one pass of next() over the quotes."""
    indicator = create_indicator(name)

    start_time = time.perf_counter()
    for quote in quotes:
        indicator.next(quote)
    total_time = time.perf_counter() - start_time

    return {
        "indicator": repr(indicator),
        "total_time": total_time,
        "avg_time_per_update": total_time / len(quotes),
        "updates_per_second": len(quotes) / total_time if total_time else float("inf"),
    }


def main():
    """Main benchmark function."""
    print("TA Stream Indicator Benchmark")
    print("=" * 40)

    rng = random.Random(42)
    quotes = [random_quote(rng) for _ in range(ITEMS_COUNT)]

    for name in available_indicators():
        results = benchmark_indicator(name, quotes)
        print(f"{results['indicator']:<20} "
              f"{results['avg_time_per_update'] * 1e6:8.3f}us/update "
              f"{results['updates_per_second']:12.0f} updates/s")


if __name__ == "__main__":
    main()
