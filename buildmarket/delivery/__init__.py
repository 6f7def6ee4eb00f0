"""
Delivery options (soft-deleted) and delivery orders.
"""
