"""
Data-access layer for the construction-services marketplace.

Entry points: `buildmarket.storage.Storage` (all operations bound to one
`buildmarket.core.db.Database`) and `buildmarket.main.app` (FastAPI wiring).
"""
