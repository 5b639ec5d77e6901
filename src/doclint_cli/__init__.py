"""Command-line interface for doclint"""

__version__ = "0.1.0"
