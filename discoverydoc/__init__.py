"""Reading, validating and exporting API Discovery documents as typed dataclasses."""

__version__ = "0.1.0"

__all__ = ["api", "auth", "document", "method", "parameter", "reader", "schema"]