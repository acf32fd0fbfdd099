"""
Test suite for bounded parameter values

Contains:
- tests/unit/          : Unit tests for individual modules
"""
