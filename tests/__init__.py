"""
Test suite for coord2d

Contains:
- tests/unit/          : Unit tests for individual modules
"""
