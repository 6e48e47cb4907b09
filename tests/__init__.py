"""
Test suite for rational values

Contains:
- tests/unit/          : Unit tests for individual modules
"""
