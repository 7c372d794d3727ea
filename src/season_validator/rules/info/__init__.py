"""INFO rules: advisory consistency warnings."""
