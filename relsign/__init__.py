"""Release signing resolver for Flutter Android projects."""

__version__ = "0.1.0"
