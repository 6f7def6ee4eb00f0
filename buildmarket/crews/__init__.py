"""
Work crews: members, member skills and portfolio entries.
"""
