"""
Core value types and integer primitives.

Value types (Duration, TimePoint) and 64-bit range helpers; no I/O and no
shared mutable state.
"""
