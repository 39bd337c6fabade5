"""
DOCX table update cycle shared by the report table updaters.
"""

from typing import Any, Callable, Optional

from docx import Document
from docx.oxml import OxmlElement
from docx.oxml.ns import qn
from docx.table import Table

from ..core.results import OperationResult
from ..utils.logging_config import get_docx_logger
from ..utils.validators import Validators
from .table_locator import TablePredicate, find_table


def make_text_paragraph(text: Optional[str]):
    """Build a ``w:p`` holding one run of whitespace-preserving plain text."""
    paragraph = OxmlElement('w:p')
    run = OxmlElement('w:r')
    text_element = OxmlElement('w:t')
    text_element.set(qn('xml:space'), 'preserve')
    text_element.text = text or ''
    run.append(text_element)
    paragraph.append(run)
    return paragraph


def make_text_cell(text: Optional[str]):
    """Build an auto-width ``w:tc`` holding a single plain text paragraph."""
    cell = OxmlElement('w:tc')
    properties = OxmlElement('w:tcPr')
    width = OxmlElement('w:tcW')
    width.set(qn('w:w'), '0')
    width.set(qn('w:type'), 'auto')
    properties.append(width)
    cell.append(properties)
    cell.append(make_text_paragraph(text))
    return cell


def make_text_row(values):
    row = OxmlElement('w:tr')
    for value in values:
        row.append(make_text_cell(value))
    return row


def set_cell_text(tc, text: Optional[str]) -> None:
    """Replace all paragraphs of a cell element with one plain text paragraph."""
    for paragraph in tc.findall(qn('w:p')):
        tc.remove(paragraph)
    tc.append(make_text_paragraph(text))


class DocxProcessor:
    """
    Open a working document, locate one table, mutate it and save in place.

    Subclasses provide the table predicate, the message used when no table
    matches, and the mutation itself. The document loader is injectable so
    the cycle can run against in-memory documents.
    """

    not_found_message = "No matching table found."
    success_message = "Successfully updated document: {path}"

    def __init__(self, document_factory: Callable[[str], Any] = Document):
        self.document_factory = document_factory
        self.validators = Validators()
        self.logger = get_docx_logger()

    def table_predicate(self) -> TablePredicate:
        raise NotImplementedError

    def apply(self, table: Table, payload: Any, result: OperationResult) -> None:
        raise NotImplementedError

    def process(self, doc_path: str, add: bool,
                prepare: Callable[[OperationResult], Any]) -> OperationResult:
        """
        Run the update cycle.

        Args:
            doc_path: Working document, overwritten on success
            add: Gate flag; when False nothing is written
            prepare: Builds the payload handed to ``apply``; returns None to abort

        Returns:
            OperationResult with ``path == doc_path`` on success
        """
        result = OperationResult(logger=self.logger)

        check = self.validators.validate_docx_path(doc_path)
        if not check['valid']:
            return result.fail(check['error_message'])
        doc_path = check['path']

        if not add:
            result.remark("Add is false. No changes made.")
            return result

        if not check['is_docx']:
            result.warning(f"Document does not have a .docx extension: {doc_path}")

        try:
            payload = prepare(result)
            if payload is None:
                return result

            self.logger.debug("Opening document: %s", doc_path)
            document = self.document_factory(doc_path)
            if document.element.body is None:
                return result.fail("Document body is null or missing.")

            table = find_table(document, self.table_predicate())
            if table is None:
                return result.fail(self.not_found_message)

            self.apply(table, payload, result)
            document.save(doc_path)
        except Exception as e:
            self.logger.debug("Update of %s failed", doc_path, exc_info=True)
            return result.fail(f"Error: {e}")

        result.path = doc_path
        result.success = True
        result.remark(self.success_message.format(path=doc_path))
        return result
