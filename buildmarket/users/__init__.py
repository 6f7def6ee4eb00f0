"""
User accounts, profiles and aggregate reputation.
"""
