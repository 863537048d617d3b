"""Shared utilities — numeric bounds and the supported-image allow-list.

Rules
-----
* No business logic.
* No I/O.
* Importable by any layer.
"""
