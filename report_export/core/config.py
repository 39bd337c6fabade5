"""
Configuration settings for the report export components.
"""

import os


class Config:
    """Central configuration for table matching, dates and PDF rendering."""

    __version__ = "1.0.0"

    # File types
    DOCX_EXTENSION = '.docx'
    PDF_EXTENSION = '.pdf'
    SUPPORTED_DOCX_EXTENSIONS = ['.docx']

    # Working copy naming
    COPY_SUFFIX = '_copy'
    COLLISION_SUFFIX_FORMAT = '{stem}_{index}{ext}'

    # Revision (version control) table: every keyword must appear in the header row
    REVISION_TABLE_KEYWORDS = (
        'revisie',
        'datum',
        'status',
        'toelichting',
        'opsteller',
        'controleur',
    )

    # Project info table: keywords that must appear in the first column
    PROJECT_INFO_TABLE_KEYWORDS = ('projectname', 'client', 'date')

    # Labels looked up in the project info table, in update order
    PROJECT_INFO_LABELS = (
        'projectname',
        'client',
        'date',
        'version',
        'author',
        'checked by',
    )

    # Date handling
    OUTPUT_DATE_FORMAT = '%Y-%m-%d'
    INVARIANT_DATE_FORMATS = (
        '%Y-%m-%d',
        '%Y/%m/%d',
        '%Y-%m-%d %H:%M',
        '%Y-%m-%d %H:%M:%S',
        # Month first whichever separator is used
        '%m/%d/%Y',
        '%m/%d/%Y %H:%M',
        '%m/%d/%Y %H:%M:%S',
        '%m-%d-%Y',
        '%m-%d-%Y %H:%M',
        '%m-%d-%Y %H:%M:%S',
        '%m.%d.%Y',
        '%m.%d.%Y %H:%M',
        '%m.%d.%Y %H:%M:%S',
        '%d %B %Y',
        '%d %b %Y',
        '%B %d, %Y',
        '%b %d, %Y',
        '%B %d %Y',
    )
    LOCAL_DATE_FORMATS = (
        '%d-%m-%Y',
        '%d/%m/%Y',
        '%d.%m.%Y',
        '%d-%m-%y',
        '%d/%m/%y',
        '%d.%m.%y',
    )

    # Word automation (ExportAsFixedFormat arguments)
    WORD_PROG_ID = 'Word.Application'
    WORD_EXPORT_FORMAT = 17        # wdExportFormatPDF
    WORD_OPTIMIZE_FOR_PRINT = 0    # wdExportOptimizeForPrint
    WORD_EXPORT_ALL_DOCUMENT = 0   # wdExportAllDocument
    WORD_EXPORT_CONTENT = 0        # wdExportDocumentContent
    WORD_HEADING_BOOKMARKS = 1     # wdExportCreateHeadingBookmarks
    WORD_ALERTS_NONE = 0           # wdAlertsNone
    WORD_DO_NOT_SAVE_CHANGES = 0   # wdDoNotSaveChanges

    # Rendering backend: 'word', 'libreoffice' or 'auto'
    DOCX_RENDER_ENGINE = os.environ.get('REPORT_EXPORT_RENDER_ENGINE', 'auto')
    LIBREOFFICE_EXECUTABLE = os.environ.get('REPORT_EXPORT_LIBREOFFICE', 'soffice')
    LIBREOFFICE_TIMEOUT = None

    # Logging
    LOGGER_NAME = 'report_export'
    LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    CONSOLE_LOG_FORMAT = '%(levelname)s: %(message)s'

    @classmethod
    def get_revision_table_description(cls) -> str:
        """Human readable list of the revision table headers."""
        return ', '.join(cls.REVISION_TABLE_KEYWORDS)
