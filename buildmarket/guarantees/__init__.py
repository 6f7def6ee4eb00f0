"""
Bank guarantees between a customer and a contractor.
"""
