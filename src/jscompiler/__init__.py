from __future__ import annotations

"""
jscompiler: JavaScript comment and whitespace stripper with a
content-addressed file cache.
"""

__version__ = "1.0.0"

__all__ = ["__version__"]
