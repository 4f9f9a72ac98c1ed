"""timeboard: a terminal clock/countdown with a resizable note board."""

__version__ = "0.1.0"
