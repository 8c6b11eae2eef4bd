"""
Core value types and limb arithmetic.

This module contains the foundational building blocks: limb-level math
primitives and the immutable numeric value types built on top of them.
"""
