"""Presentation frontends for the fifteen puzzle."""
