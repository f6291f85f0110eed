"""
Test suite for bonding-curves

Contains:
- tests/unit/          : Unit tests for curves, checked arithmetic, contracts and quote facade
"""
