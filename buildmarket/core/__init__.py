"""
Shared, cross-cutting code for the data-access layer.

`core/` contains small building blocks every repository uses (DB handle,
settings, filters, JSON list columns, naming, timestamps). Keep entity SQL in
the corresponding feature package (e.g. `tenders/`).
"""
