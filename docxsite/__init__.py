"""A small HTTP server that renders a documentation page from components with scoped CSS classes."""

__version__ = "0.1.0"