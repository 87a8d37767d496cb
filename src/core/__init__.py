"""
Core money primitives, domain models, and wire contracts.

This module contains the foundational building blocks that are independent
of external systems (HTTP framework, ORM, database).
"""
