"""Generate a seeded nucleotide sequence and patterns, and find the patterns exactly."""

__version__ = "1.2.0"

__all__ = ["cli", "generate", "rng", "search"]