"""Load, normalise and link programs written as JSON documents."""

__version__ = "0.1.0"
__all__ = ["cli", "ir", "number", "parse", "value", "valuetype"]