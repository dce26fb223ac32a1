"""
Storefront Dashboard

Revenue, order, product and customer metrics for the storefront operator
dashboard, derived from the remote collection store.
"""

__version__ = "1.0.0"
