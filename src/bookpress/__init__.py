"""Turn Word manuscripts into print-ready HTML and IDML packages."""

__version__ = "0.1.0"
