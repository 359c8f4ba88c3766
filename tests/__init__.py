"""
Test suite for plane-geometry

Contains:
- tests/unit/          : Unit tests for value types, safeguards and merging
"""
