"""mithril: Source 2 replay validation toolkit."""

__version__ = "0.1.0"
