"""Validation rule catalog, grouped by severity tier."""
