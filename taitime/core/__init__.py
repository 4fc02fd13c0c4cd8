"""
Core domain models, mathematical primitives, and invariants.

This module contains the foundational building blocks of the time model:
nonnegative spans, polarity relative to the TAI epoch, and instants.
"""
