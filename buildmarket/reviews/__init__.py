"""
Reviews left by one user for another (optionally for a crew).
"""
