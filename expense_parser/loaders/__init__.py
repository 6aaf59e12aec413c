"""
Loaders Module - Text extraction from notification files.
"""

from .text_loader import (
    load_document,
    load_pdf,
    load_text_file,
    DocumentLoadError
)

__all__ = [
    'load_document',
    'load_pdf',
    'load_text_file',
    'DocumentLoadError',
]
