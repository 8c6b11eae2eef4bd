"""
Test suite for tinybignumbers

Contains:
- tests/unit/          : Unit and property tests for limbs, long division,
                         Int128 and FixedPoint56Q8
"""
