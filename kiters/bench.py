"""Micro benchmarks for id generation.

Run with ``python -m kiters.bench [--number N]``; prints nanoseconds per call.
"""

import argparse
import timeit
from typing import Callable

from kiters.eid import ExternalId
from kiters.request_id import (
    RequestIdGenerator,
    WideRequestIdGenerator,
    as_str,
    encode_request_id,
    encode_request_id_mixed,
    encode_request_id_mixed_wide,
    encode_request_id_wide,
)
from kiters.timestamp import get_utc_timestamp

DEFAULT_NUMBER = 100_000
ENCODE_INPUT = 12345


def _cases() -> dict[str, Callable[[], object]]:
    generator = RequestIdGenerator()
    mixed_generator = RequestIdGenerator.new_mixed()
    wide_generator = WideRequestIdGenerator()
    mixed_wide_generator = WideRequestIdGenerator.new_mixed()
    encoded = encode_request_id(ENCODE_INPUT)

    return {
        "request_id/encode_plain": lambda: encode_request_id(ENCODE_INPUT),
        "request_id/encode_mixed": lambda: encode_request_id_mixed(ENCODE_INPUT),
        "request_id/encode_wide": lambda: encode_request_id_wide(ENCODE_INPUT),
        "request_id/encode_mixed_wide": lambda: encode_request_id_mixed_wide(
            ENCODE_INPUT
        ),
        "request_id/generator_next_id": generator.next_id,
        "request_id/generator_mixed": mixed_generator.next_id,
        "request_id/generator_to_string": generator.next_id_string,
        "request_id/generator_wide": wide_generator.next_id,
        "request_id/generator_mixed_wide": mixed_wide_generator.next_id,
        "request_id/generator_wide_to_string": wide_generator.next_id_string,
        "request_id/as_str": lambda: as_str(encoded),
        "eid/new_to_string": lambda: ExternalId.new("aid").to_string(),
        "timestamp/get_utc_timestamp": get_utc_timestamp,
    }


def run_benchmarks(number: int = DEFAULT_NUMBER) -> dict[str, float]:
    """Time each case ``number`` times and return nanoseconds per call."""
    results = {}
    for name, func in _cases().items():
        seconds = timeit.timeit(func, number=number)
        results[name] = seconds * 1e9 / number
    return results


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Benchmark kiters id generation.")
    parser.add_argument("--number", type=int, default=DEFAULT_NUMBER)
    args = parser.parse_args(argv)

    results = run_benchmarks(args.number)
    width = max(len(name) for name in results)
    for name, ns in results.items():
        print(f"{name:<{width}}  {ns:10.1f} ns/call")


if __name__ == "__main__":
    main()
