"""A terminal tile-based puzzle game: map loading, validation and play logic, with small text helpers."""

__version__ = "1.0.0"