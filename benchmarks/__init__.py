"""Performance benchmarks for graphsteps.

This package contains microbenchmarks for the step-recording engines and
the indexed heap they run on.
"""
