"""Classic sorts, searches, number sequences, string utilities, stacks and a queue."""

__version__ = "0.1.0"