"""
Core domain models, date math primitives, and contracts.

This module contains the foundational building blocks that are independent
of any UI toolkit (rendering engines, gesture capture, etc.).
"""
