"""LoL champion class and skills trainer."""

__version__ = "0.1.0"
