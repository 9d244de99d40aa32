"""
Test suite for responsive-font-sizes

Contains:
- tests/unit/          : Unit tests for individual modules
"""
