"""
Core module shared by the products and inventory apps.

This module contains:
- Domain events, exceptions and value objects
- The in-process event bus and its audit/metrics handlers
- Store error translation and the delivery retry policy
- Authentication, observability and metrics middleware
"""
