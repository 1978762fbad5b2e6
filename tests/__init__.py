"""
Test suite for order-totals

Contains:
- tests/unit/          : Unit tests for individual modules
"""
