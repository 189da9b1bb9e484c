"""INKPOST

A small blogging back end: authors manage posts and categories, visitors
read published posts. Slugs are derived from titles and names, and the
post/category association is kept referentially sound by the service layer
and the store alike.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
