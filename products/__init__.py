"""
Products module - catalog of code pools.

This module handles:
- Product entity and domain logic
- Per-user cap and active/inactive gate
- Product administration (create, update, delete, list)
"""
