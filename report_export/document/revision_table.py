"""
Version control table updates.

Replaces the body of the revision table (headers: revisie, datum, status,
toelichting, opsteller, controleur) with one row per revision record.
The header row is never touched.
"""

from dataclasses import astuple, dataclass
from datetime import datetime
from typing import Callable, List, Optional, Sequence

from docx.table import Table

from ..core.config import Config
from ..core.results import OperationResult
from ..utils.dates import resolve_date
from .docx_processor import DocxProcessor, make_text_row
from .table_locator import TablePredicate, header_row_contains, table_rows


@dataclass
class RevisionRecord:
    revision: str
    date: str = ''
    status: str = ''
    comment: str = ''
    author: str = ''
    checker: str = ''

    def values(self) -> tuple:
        """Cell values in table column order."""
        return astuple(self)


def _item(values: Optional[Sequence[Optional[str]]], index: int) -> str:
    if values is None or index >= len(values):
        return ''
    return values[index] or ''


def build_revision_records(revisions: Sequence[Optional[str]],
                           dates: Optional[Sequence[Optional[str]]] = None,
                           statuses: Optional[Sequence[Optional[str]]] = None,
                           comments: Optional[Sequence[Optional[str]]] = None,
                           authors: Optional[Sequence[Optional[str]]] = None,
                           checkers: Optional[Sequence[Optional[str]]] = None,
                           on_warning: Optional[Callable[[str], None]] = None,
                           now: Optional[datetime] = None) -> List[RevisionRecord]:
    """
    Zip the parallel input lists into revision records.

    Record ``i`` takes element ``i`` of every list, or an empty string when
    that list is shorter than ``revisions``. Dates are resolved to
    ``yyyy-MM-dd``; unparseable dates become today's date and are reported
    through ``on_warning`` with their index.
    """
    if now is None:
        now = datetime.now()

    records = []
    for index, revision in enumerate(revisions):
        raw_date = _item(dates, index)
        date_text, warning = resolve_date(raw_date, now)
        if warning and on_warning is not None:
            on_warning(f"Datum '{raw_date}' op index {index} kon niet worden verwerkt. "
                       f"Huidige datum wordt gebruikt.")
        records.append(RevisionRecord(
            revision=revision or '',
            date=date_text,
            status=_item(statuses, index),
            comment=_item(comments, index),
            author=_item(authors, index),
            checker=_item(checkers, index),
        ))
    return records


def replace_revision_rows(table: Table, records: Sequence[RevisionRecord]) -> int:
    """
    Remove every row after the header and append one row per record.

    Returns:
        int: Number of rows removed
    """
    old_rows = table_rows(table)[1:]
    for tr in old_rows:
        table._tbl.remove(tr)

    for record in records:
        table._tbl.append(make_text_row(record.values()))

    return len(old_rows)


class RevisionTableUpdater(DocxProcessor):
    """Writes revision rows into the first version control table of a document."""

    not_found_message = ("No matching table found with Dutch headers: "
                         f"{Config.get_revision_table_description()}.")
    success_message = "Successfully updated document: {path}"

    def table_predicate(self) -> TablePredicate:
        return header_row_contains(Config.REVISION_TABLE_KEYWORDS)

    def apply(self, table: Table, payload: List[RevisionRecord], result: OperationResult) -> None:
        removed = replace_revision_rows(table, payload)
        self.logger.info("Replaced %d revision row(s) with %d new row(s)", removed, len(payload))

    def update(self, doc_path: str,
               revisions: Optional[Sequence[str]],
               dates: Optional[Sequence[str]] = None,
               statuses: Optional[Sequence[str]] = None,
               comments: Optional[Sequence[str]] = None,
               authors: Optional[Sequence[str]] = None,
               checkers: Optional[Sequence[str]] = None,
               add: bool = False,
               now: Optional[datetime] = None) -> OperationResult:
        """
        Replace the revision rows of the working document.

        Args:
            doc_path: Working .docx path, saved in place
            revisions: Revision labels, at least one
            dates, statuses, comments, authors, checkers: Parallel lists
            add: Gate flag; nothing is written when False
            now: Reference time for blank or invalid dates

        Returns:
            OperationResult with the written path and success flag
        """
        def prepare(result: OperationResult) -> Optional[List[RevisionRecord]]:
            if not revisions:
                result.fail("Provide at least one Revisie entry.")
                return None
            return build_revision_records(revisions, dates, statuses, comments,
                                          authors, checkers,
                                          on_warning=result.warning, now=now)

        return self.process(doc_path, add, prepare)
