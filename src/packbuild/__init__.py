"""Size-constrained build pipeline for packed source artifacts."""

__version__ = "0.1.0"
