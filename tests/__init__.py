"""
Test suite for floatguard

Contains:
- tests/unit/          : Unit and property-based tests for individual modules
- tests/strategies.py  : Shared Hypothesis strategies
"""
