"""StageScout: currently running Broadway productions from two public sources."""

__version__ = "0.1.0"
