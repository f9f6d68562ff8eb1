"""An interactive eight-entry phone book and a shouting megaphone."""

__version__ = "1.0.0"