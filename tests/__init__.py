"""
Test suite for rational-rounding

Contains:
- tests/unit/          : Unit tests for individual modules
"""
