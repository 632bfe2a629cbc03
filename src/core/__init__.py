"""
Core configuration, domain models, mathematical primitives, and contracts.

This module contains the foundational building blocks: the scalar and exact
integer engines, immutable value objects, and JSON contracts for results.
"""
