"""robotslint — RFC 9309 robots.txt validator."""

__version__ = "0.1.0"
