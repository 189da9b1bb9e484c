"""Adapters (infrastructure) for INKPOST.

Concrete implementations of the interface ports: SQLAlchemy-backed and
in-memory repositories, the unit of work, the system clock, plus the
database plumbing they need (engines, metadata, types, migrations).

Dependency rule: may import `inkpost.interfaces` and `inkpost.domain`; those
packages must not import this one.
"""
