"""
Entry point that only points elsewhere.

The library is exercised through its test suite and benchmark runner;
running this module directly always fails with a fixed message.
"""

USAGE = (
    "This program only exposes tests and benchmarks. "
    "Run `pytest` or `python benchmark_runner.py` instead."
)


def main() -> None:
    raise SystemExit(USAGE)


if __name__ == "__main__":
    main()
