"""
Project package for the SEO presentation site.

Pure constants only: no Django imports, no I/O, no settings access.
"""

__all__ = ["__version__", "__description__"]

__version__ = "1.0.0"
__description__ = "SEO metadata presentation for Django content pages."
