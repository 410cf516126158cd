"""A small concurrent crawler that counts internal links on a website."""

__version__ = "0.1.0"
__all__ = ["cli", "crawler", "fetch", "normalize", "parse", "report"]