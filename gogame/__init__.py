"""Play Go in the terminal as black against a simple computer opponent."""

__version__ = "0.1.0"