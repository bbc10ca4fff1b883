"""
Test suite for timepoint

Contains:
- tests/unit/          : Unit tests for Duration, TimePoint, range helpers and clocks
"""
