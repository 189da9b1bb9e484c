"""Domain layer for INKPOST.

Pure business rules with no I/O: slug derivation and excerpt defaults.
Everything here is deterministic and side-effect free.

Dependency rule: do not import from `inkpost.adapters` or `inkpost.entrypoints`.
"""
