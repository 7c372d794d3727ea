"""CRITICAL rules: data is invalid or corrupt and cannot be saved."""
