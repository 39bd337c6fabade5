"""
DOCX to PDF converter interface and backend selection.
"""

import os
from typing import Optional

from ..core.config import Config


class ConversionError(Exception):
    """Raised when a backend fails to produce the PDF."""

    def __init__(self, message: str, inner: Optional[BaseException] = None):
        super().__init__(message)
        self.inner = inner


class ConverterUnavailableError(ConversionError):
    """Raised when the backend application is not installed or cannot be started."""


class Converter:
    """Narrow interface implemented by every rendering backend."""

    name = 'converter'

    def is_available(self) -> bool:
        raise NotImplementedError

    def convert(self, input_path: str, output_path: Optional[str] = None) -> str:
        """
        Convert a DOCX file to PDF.

        Args:
            input_path: Path to the DOCX file
            output_path: Target PDF path; defaults to the input path with a .pdf extension

        Returns:
            str: Path of the written PDF

        Raises:
            ConversionError: If the conversion fails
        """
        raise NotImplementedError


def pdf_path_for(docx_path: str) -> str:
    """Swap the extension of a document path for .pdf."""
    return os.path.splitext(docx_path)[0] + Config.PDF_EXTENSION


def get_converter(engine: Optional[str] = None) -> Converter:
    """
    Build the converter for a render engine name.

    Args:
        engine: 'word', 'libreoffice' or 'auto'; defaults to Config.DOCX_RENDER_ENGINE

    Returns:
        Converter: The selected backend. With 'auto', Word is preferred when
        it is available, otherwise LibreOffice.
    """
    from .libreoffice_converter import LibreOfficeConverter
    from .word_converter import WordConverter

    engine = (engine or Config.DOCX_RENDER_ENGINE).lower()
    if engine == 'word':
        return WordConverter()
    if engine == 'libreoffice':
        return LibreOfficeConverter()
    if engine == 'auto':
        word = WordConverter()
        if word.is_available():
            return word
        return LibreOfficeConverter()
    raise ValueError(f"Unknown render engine: {engine}")
