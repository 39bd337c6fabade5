"""
Word automation for DOCX to PDF conversion.
"""

import os
import sys
from typing import Optional

from ..core.config import Config
from ..utils.logging_config import get_converter_logger
from .converter import ConversionError, Converter, ConverterUnavailableError, pdf_path_for


def _load_com():
    """Import the pywin32 COM modules, which only exist on Windows."""
    try:
        import pythoncom
        import win32com.client
    except ImportError as e:
        raise ConverterUnavailableError(
            "Microsoft Word automation requires pywin32 on Windows.", e) from e
    return pythoncom, win32com.client


class WordConverter(Converter):
    """Handles DOCX to PDF conversion using Microsoft Word automation."""

    name = 'word'

    def __init__(self):
        self.logger = get_converter_logger()

    def is_available(self) -> bool:
        """Check whether Word is registered for automation on this machine."""
        if not sys.platform.startswith('win'):
            return False
        try:
            pythoncom, _ = _load_com()
        except ConverterUnavailableError:
            return False
        try:
            # Resolves the ProgID to its CLSID; fails when Word is not registered
            pythoncom.MakeIID(Config.WORD_PROG_ID)
        except pythoncom.com_error:
            return False
        return True

    def convert(self, input_path: str, output_path: Optional[str] = None) -> str:
        """
        Export a document to PDF with heading bookmarks and structure tags.

        Word is started hidden with alerts suppressed, the document is opened
        read-only without being added to the recent files list, and both the
        document and the application are closed on every exit path.
        """
        pythoncom, client = _load_com()
        output_path = output_path or pdf_path_for(input_path)
        input_path = os.path.abspath(input_path)
        output_path = os.path.abspath(output_path)

        pythoncom.CoInitialize()
        word_app = None
        doc = None
        try:
            try:
                word_app = client.DispatchEx(Config.WORD_PROG_ID)
            except Exception as e:
                raise ConverterUnavailableError(
                    f"Microsoft Word is not installed (could not start '{Config.WORD_PROG_ID}').", e) from e

            word_app.Visible = False
            word_app.DisplayAlerts = Config.WORD_ALERTS_NONE

            self.logger.debug("Opening document: %s", os.path.basename(input_path))
            doc = word_app.Documents.Open(
                FileName=input_path,
                ReadOnly=True,
                AddToRecentFiles=False,
            )

            self.logger.debug("Exporting to PDF: %s", os.path.basename(output_path))
            doc.ExportAsFixedFormat(
                OutputFileName=output_path,
                ExportFormat=Config.WORD_EXPORT_FORMAT,
                OpenAfterExport=False,
                OptimizeFor=Config.WORD_OPTIMIZE_FOR_PRINT,
                Range=Config.WORD_EXPORT_ALL_DOCUMENT,
                Item=Config.WORD_EXPORT_CONTENT,
                IncludeDocProps=True,
                KeepIRM=True,
                CreateBookmarks=Config.WORD_HEADING_BOOKMARKS,
                DocStructureTags=True,
                BitmapMissingFonts=True,
                UseISO19005_1=False,
            )
            self.logger.info("Converted '%s' to PDF with bookmarks", os.path.basename(input_path))
            return output_path

        except ConversionError:
            raise
        except Exception as e:
            raise ConversionError(f"Error during export: {e}", _inner_cause(e)) from e

        finally:
            if doc is not None:
                try:
                    doc.Close(SaveChanges=Config.WORD_DO_NOT_SAVE_CHANGES)
                    self.logger.debug("Document closed")
                except Exception as e:
                    self.logger.warning("Error closing document: %s", e)
            if word_app is not None:
                try:
                    word_app.Quit()
                    self.logger.debug("Word closed")
                except Exception as e:
                    self.logger.warning("Error quitting Word: %s", e)
            doc = None
            word_app = None
            pythoncom.CoUninitialize()


def _inner_cause(error: Exception) -> Optional[BaseException]:
    """
    Pull the nested COM error out of a pywintypes.com_error, if any.

    com_error.excepinfo is (wcode, source, description, helpfile, helpcontext, scode).
    """
    excepinfo = getattr(error, 'excepinfo', None)
    if excepinfo and len(excepinfo) > 2 and excepinfo[2]:
        return Exception(excepinfo[2])
    return error.__cause__ or error.__context__
