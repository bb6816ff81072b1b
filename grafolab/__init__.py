"""Graph loading, algorithms, text reports and an interactive menu for single-character vertex ids."""

__version__ = "0.1.0"
__all__ = ["algorithms", "cli", "graph", "reports"]