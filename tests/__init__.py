"""
Test suite for effective-complex

Contains:
- tests/unit/          : Unit tests for individual modules
"""
