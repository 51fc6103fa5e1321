"""Experiment module package for running the sequence benchmarks.

Provides the experiment runner, the series joiner, CSV/LaTeX writers and the
full-run orchestration.
"""
