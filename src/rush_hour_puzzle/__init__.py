"""Rush Hour style sliding-block puzzle with a pointer-driven drag engine."""

__version__ = "0.1.0"
