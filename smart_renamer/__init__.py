"""smart-renamer: naming convention inference, validation and conversion."""

__version__ = "1.2.0"
