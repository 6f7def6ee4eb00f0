"""
Direct messages between users and system notifications.
"""
