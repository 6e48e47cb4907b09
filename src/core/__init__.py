"""
Core domain models and mathematical primitives.

This module contains integer primitives (gcd, simplify) and the immutable
rational value types built on them. No I/O, no external systems.
"""
