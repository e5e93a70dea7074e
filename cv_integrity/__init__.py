"""
Content-integrity checks for the multi-language personal site document.
"""

__version__ = "0.1.0"
