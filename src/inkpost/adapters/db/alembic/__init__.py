"""Packaged Alembic migration environment for INKPOST."""
