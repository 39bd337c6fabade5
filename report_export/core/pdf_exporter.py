"""
PDF export of a working document through an external rendering backend.
"""

from typing import Optional

from ..document.converter import ConversionError, Converter, get_converter, pdf_path_for
from ..utils.logging_config import get_converter_logger
from ..utils.validators import Validators
from .results import OperationResult


class PdfExporter:
    """Converts a working .docx into a PDF placed next to it."""

    def __init__(self, converter: Optional[Converter] = None, engine: Optional[str] = None):
        """
        Args:
            converter: Backend to use; built from ``engine`` when omitted
            engine: Render engine name passed to ``get_converter``
        """
        self._converter = converter
        self.engine = engine
        self.validators = Validators()
        self.logger = get_converter_logger()

    @property
    def converter(self) -> Converter:
        if self._converter is None:
            self._converter = get_converter(self.engine)
        return self._converter

    def export(self, doc_path: str, create: bool = False) -> OperationResult:
        result = OperationResult(logger=self.logger)

        check = self.validators.validate_docx_path(doc_path)
        if not check['valid']:
            return result.fail(check['error_message'])
        doc_path = check['path']

        if not create:
            result.remark("Create is false. No conversion performed.")
            return result

        if not check['is_docx']:
            result.warning(f"Document does not have a .docx extension: {doc_path}")

        try:
            pdf_path = pdf_path_for(doc_path)
            converter = self.converter
            self.logger.info("Exporting %s with %s", doc_path, converter.name)
            written = converter.convert(doc_path, pdf_path)
        except ConversionError as e:
            result.fail(str(e))
            if e.inner is not None and str(e.inner) != str(e):
                result.error(f"Inner error: {e.inner}")
            return result
        except Exception as e:
            self.logger.debug("PDF export of %s failed", doc_path, exc_info=True)
            result.fail(f"Error during export: {e}")
            if e.__cause__ is not None:
                result.error(f"Inner error: {e.__cause__}")
            return result

        pdf_check = self.validators.validate_pdf_output(written)
        if not pdf_check['valid']:
            return result.fail(pdf_check['error_message'])

        result.path = written
        result.success = True
        result.remark(f"Successfully exported PDF: {written} ({pdf_check['page_count']} page(s))")
        return result
