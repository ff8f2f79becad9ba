"""
Test suite for the dense matrix library

Contains:
- tests/unit/          : Unit tests for individual modules
"""
