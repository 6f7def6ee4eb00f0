"""
Marketplace listings (materials, equipment, services).
"""
