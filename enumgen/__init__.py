"""Generate TypeScript enum constants from OpenAPI string enum schemas."""

__version__ = "0.3.0"
