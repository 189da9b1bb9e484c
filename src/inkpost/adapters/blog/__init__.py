"""Blog store adapters: the schema plus SQLAlchemy and in-memory repositories."""
