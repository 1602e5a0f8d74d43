"""Module-level parameter registries built on the shared machinery."""
