"""DVC points quoting and ready-stay pricing engine."""

__version__ = "0.1.0"
