"""
Core numeric primitives, domain models, and request contracts.

This package contains the building blocks that are independent of any
transport layer (HTTP frameworks, persistence, etc.).
"""
