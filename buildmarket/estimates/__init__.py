"""
Cost estimates and their line items.
"""
