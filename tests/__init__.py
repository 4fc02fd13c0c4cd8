"""
Test suite for taitime

Contains:
- tests/unit/          : Unit tests for spans, instants, contracts and clock noise
"""
