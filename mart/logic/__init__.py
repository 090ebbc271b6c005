"""Core business logic layer.

Subpackages:
- planning: weekly plan store, normalizer, sample generator and the request session
- reporting: nutrition aggregation, targets, weekly report and dashboard
- checkout: cart summary and order creation
"""
__all__ = ["planning", "reporting", "checkout"]
