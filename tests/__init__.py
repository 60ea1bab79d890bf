"""
Test suite for weekstrip

Contains:
- tests/unit/          : Unit tests for individual modules
"""
