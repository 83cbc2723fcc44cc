"""
Test suite for linmat

Contains:
- tests/unit/          : Unit tests for individual modules
"""
