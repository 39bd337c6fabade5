"""
Report Export - fill Word report templates and export them to PDF.

This package creates working copies of .docx report templates, rewrites the
version control and project information tables inside them, and converts the
result to PDF through Microsoft Word or LibreOffice.
"""

__version__ = "1.0.0"
__author__ = "Report Export Team"

from .core.config import Config
from .core.pdf_exporter import PdfExporter
from .core.results import MessageLevel, OperationResult, WorkingCopyResult
from .core.working_copy import WorkingCopyProvisioner
from .document.project_info import ProjectInfoUpdater
from .document.revision_table import RevisionTableUpdater

__all__ = [
    'Config',
    'MessageLevel',
    'OperationResult',
    'PdfExporter',
    'ProjectInfoUpdater',
    'RevisionTableUpdater',
    'WorkingCopyProvisioner',
    'WorkingCopyResult',
]
