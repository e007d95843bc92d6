"""
Inventory module - activation code pool and delivery ledger.

This module handles:
- Code entity and the delivery ledger
- Code allocation with a per-user cap (deliver)
- Bulk loading with deduplication (load)
- Inventory accounting (status)
- Code administration (list, manual assign, delete)
"""
