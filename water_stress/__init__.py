"""Water stress monitoring for water-stressed cities worldwide."""

__version__ = "1.0.0"
