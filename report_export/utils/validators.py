"""
Validation utilities for document paths and exported PDF files.
"""

import os
from typing import Any, Dict

import fitz  # PyMuPDF

from ..core.config import Config


class Validators:
    """Utility class for validating files and paths."""

    @staticmethod
    def validate_docx_path(docx_path) -> Dict[str, Any]:
        """
        Validate the path of a working document.

        Only emptiness and existence are fatal; a file that does not carry a
        .docx extension is still accepted and flagged through 'is_docx'.

        Args:
            docx_path: Path to DOCX file, as a string or path-like object

        Returns:
            Dict with validation results; 'path' holds the path as a string
        """
        result = {
            'valid': False,
            'path': '',
            'error_message': None,
            'is_docx': False,
        }

        if docx_path is not None:
            try:
                docx_path = os.fsdecode(docx_path)
            except TypeError:
                result['error_message'] = f"DocPath is not a valid path: {docx_path!r}"
                return result

        if docx_path is None or not docx_path.strip():
            result['error_message'] = "DocPath is empty."
            return result

        result['path'] = docx_path
        if not os.path.isfile(docx_path):
            result['error_message'] = f"Document not found: {docx_path}"
            return result

        result['is_docx'] = any(docx_path.lower().endswith(ext)
                                for ext in Config.SUPPORTED_DOCX_EXTENSIONS)
        result['valid'] = True
        return result

    @staticmethod
    def validate_pdf_output(pdf_path: str) -> Dict[str, Any]:
        """
        Validate a PDF produced by a converter.

        Args:
            pdf_path: Path of the exported PDF

        Returns:
            Dict with validation results including page count
        """
        result = {
            'valid': False,
            'page_count': 0,
            'error_message': None,
            'file_size_mb': 0.0,
        }

        if not os.path.isfile(pdf_path):
            result['error_message'] = f"PDF was not created: {pdf_path}"
            return result

        try:
            with fitz.open(pdf_path) as pdf_doc:
                page_count = len(pdf_doc)
        except Exception as e:
            result['error_message'] = f"Invalid PDF file: {e}"
            return result

        if page_count == 0:
            result['error_message'] = f"PDF has no pages: {pdf_path}"
            return result

        result['page_count'] = page_count
        result['file_size_mb'] = os.path.getsize(pdf_path) / (1024 * 1024)
        result['valid'] = True
        return result
