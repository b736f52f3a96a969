"""PlaySync web-application support utilities."""

__version__ = "0.1.0"
