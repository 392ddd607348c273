"""Export pipeline benchmarks (pytest-benchmark).

Run with::

    pytest tests/benchmarks/ --benchmark-only
    pytest tests/benchmarks/ --benchmark-sort=median

As plain functional tests::

    pytest tests/benchmarks/ --benchmark-disable
"""
