"""BLOCKING rules: structurally valid but inconsistent; blocks publish."""
