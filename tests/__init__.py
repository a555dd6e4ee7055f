"""
Test suite for calendiff

Contains:
- tests/unit/          : Unit tests for individual modules
"""
