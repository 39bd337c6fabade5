"""
Project information table updates.

The project info table is a two column key/value table. Its first column
holds labels such as "ProjectName", "Client" and "Date"; the second column
receives the values.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional, Tuple

from docx.table import Table

from ..core.config import Config
from ..core.results import OperationResult
from ..utils.dates import resolve_date
from .docx_processor import DocxProcessor, set_cell_text
from .table_locator import TablePredicate, find_row_by_label, first_column_contains, row_cells


@dataclass
class ProjectInfoFields:
    project_name: str = ''
    client: str = ''
    date: str = ''
    version: str = ''
    author: str = ''
    checked_by: str = ''

    def items(self) -> List[Tuple[str, str]]:
        """(label, value) pairs in update order."""
        values = (self.project_name, self.client, self.date,
                  self.version, self.author, self.checked_by)
        return list(zip(Config.PROJECT_INFO_LABELS, (v or '' for v in values)))


def fill_project_info(table: Table, fields: ProjectInfoFields) -> List[str]:
    """
    Write each field into the value cell of the row carrying its label.

    Labels without a row, and rows with a single cell, are skipped.

    Returns:
        List of labels that were written
    """
    written = []
    for label, value in fields.items():
        tr = find_row_by_label(table, label)
        if tr is None:
            continue
        cells = row_cells(tr)
        if len(cells) < 2:
            continue
        set_cell_text(cells[1], value)
        written.append(label)
    return written


class ProjectInfoUpdater(DocxProcessor):
    """Fills the first project info table of a document."""

    not_found_message = "No matching project-info table found."
    success_message = "Successfully updated project info: {path}"

    def table_predicate(self) -> TablePredicate:
        return first_column_contains(Config.PROJECT_INFO_TABLE_KEYWORDS)

    def apply(self, table: Table, payload: ProjectInfoFields, result: OperationResult) -> None:
        written = fill_project_info(table, payload)
        self.logger.info("Project info labels written: %s", ', '.join(written) or 'none')

    def update(self, doc_path: str,
               project_name: str = '',
               client: str = '',
               date: str = '',
               version: str = '',
               author: str = '',
               checked_by: str = '',
               add: bool = False,
               now: Optional[datetime] = None) -> OperationResult:
        """
        Fill the project info table of the working document.

        The date is written as ``yyyy-MM-dd``; a blank date means today and
        an unparseable one falls back to today with a warning.
        """
        def prepare(result: OperationResult) -> ProjectInfoFields:
            date_text, warning = resolve_date(date, now)
            if warning:
                result.warning(warning)
            return ProjectInfoFields(project_name, client, date_text,
                                     version, author, checked_by)

        return self.process(doc_path, add, prepare)
