"""Switch Claude settings profiles and launch local projects."""

__version__ = "2.4.0"
