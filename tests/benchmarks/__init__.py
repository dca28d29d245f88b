"""Benchmarks package, uses pytest-benchmark.

Files are named ``bench_*.py`` so the default test run skips them. Run with::

    pytest tests/benchmarks/bench_logging.py -v
    pytest tests/benchmarks/bench_logging.py -v --benchmark-sort=median
    pytest tests/benchmarks/bench_logging.py --benchmark-disable
"""
