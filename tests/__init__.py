"""
Test suite for exactdec

Contains:
- tests/unit/          : Unit tests for grammar, parser, formatter, comparator, rounding and contracts
"""
