"""Schema-based parsing and validation of untyped data, with coercion, transforms and localized error messages."""

__version__ = "0.1.0"