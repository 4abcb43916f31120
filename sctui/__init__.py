"""A terminal interface for browsing SoundCloud, with a small API helper."""

__version__ = "0.1.0"
__all__ = ["__version__"]