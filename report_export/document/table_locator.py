"""
Locate report tables by the label text in their cells.

Labels are compared after trimming and lowercasing, using substring
containment, so "Revisie nr." still matches the keyword "revisie".
"""

from typing import Callable, Iterable, List, Optional

from docx.oxml.ns import qn
from docx.table import Table

TablePredicate = Callable[[Table], bool]


def get_cell_text(tc) -> str:
    """Concatenate every text run inside a cell element, ignoring formatting."""
    return ''.join(t.text or '' for t in tc.iter(qn('w:t')))


def normalize(text: str) -> str:
    return text.strip().lower()


def row_cells(tr) -> List:
    """Direct cell elements of a row element."""
    return tr.findall(qn('w:tc'))


def table_rows(table: Table) -> List:
    """Direct row elements of a table."""
    return table._tbl.findall(qn('w:tr'))


def first_cell_text(tr) -> Optional[str]:
    cells = row_cells(tr)
    if not cells:
        return None
    return normalize(get_cell_text(cells[0]))


def _contains_all(texts: List[str], keywords: Iterable[str]) -> bool:
    return all(any(keyword in text for text in texts) for keyword in keywords)


def header_row_contains(keywords: Iterable[str]) -> TablePredicate:
    """Predicate: the first row's cells mention every keyword."""
    keywords = tuple(keywords)

    def predicate(table: Table) -> bool:
        rows = table_rows(table)
        if not rows:
            return False
        header = [normalize(get_cell_text(tc)) for tc in row_cells(rows[0])]
        return _contains_all(header, keywords)

    return predicate


def first_column_contains(keywords: Iterable[str]) -> TablePredicate:
    """Predicate: the first cells of the table's rows mention every keyword."""
    keywords = tuple(keywords)

    def predicate(table: Table) -> bool:
        texts = [text for text in (first_cell_text(tr) for tr in table_rows(table))
                 if text is not None]
        return _contains_all(texts, keywords)

    return predicate


def find_table(document, predicate: TablePredicate) -> Optional[Table]:
    """
    Return the first top-level table of the document accepted by the predicate.

    Args:
        document: python-docx Document
        predicate: Callable deciding whether a table matches

    Returns:
        The matching Table, or None if no table qualifies
    """
    for table in document.tables:
        if predicate(table):
            return table
    return None


def find_row_by_label(table: Table, label: str):
    """Return the first row element whose first cell contains the label."""
    label = label.lower()
    for tr in table_rows(table):
        text = first_cell_text(tr)
        if text is not None and label in text:
            return tr
    return None
