"""
Core domain models, mathematical primitives, and contracts.

This module contains the foundational building blocks of the matrix library:
the Matrix entity, error codes, numerical safeguards and serialization
contracts.
"""
