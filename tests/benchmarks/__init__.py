"""Benchmarks for colltools

Benchmarks are disabled (only executed as tests) by default in setup.cfg.
You can enable them with --benchmark-enable if your want to execute them.

E.g. in order to execute all the benchmarks::

    pytest tests/benchmarks --benchmark-enable
"""
