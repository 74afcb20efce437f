"""
Core text color resolution.
"""

from contrast_color.core.resolver import (
    ContrastResolver,
    Diagnostic,
    Resolution,
    explain,
    get_contrast_text_color,
    resolve,
)

__all__ = [
    "ContrastResolver",
    "Diagnostic",
    "Resolution",
    "explain",
    "get_contrast_text_color",
    "resolve",
]
