"""INKPOST command-line interface."""
