"""
Tenders and the bids placed on them.
"""
