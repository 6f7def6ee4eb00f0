"""
Interior/design projects with visualizations and attached files.
"""
