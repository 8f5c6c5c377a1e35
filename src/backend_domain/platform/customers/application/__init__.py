"""Customer application layer: commands and queries."""
