"""Generate C# enums from relational lookup tables."""

__version__ = "0.1.0"
