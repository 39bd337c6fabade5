#!/usr/bin/env python3
"""
Report Export - Main CLI entry point.

Fills Word report templates and exports them to PDF.
"""

import argparse
import sys

from report_export.core.config import Config
from report_export.core.pdf_exporter import PdfExporter
from report_export.core.results import OperationResult
from report_export.core.working_copy import WorkingCopyProvisioner
from report_export.document.project_info import ProjectInfoUpdater
from report_export.document.revision_table import RevisionTableUpdater
from report_export.utils.logging_config import get_logger, setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Report Export - fill .docx report templates and export them to PDF',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s create template.docx --output-dir out --filename report --create
  %(prog)s version out/report.docx --revisie A B --datum 2025-03-01 2025-04-01 --add
  %(prog)s info out/report.docx --project-name "Roof A" --client Acme --add
  %(prog)s export out/report.docx --engine libreoffice --create

Every command prints the resulting path and exits with 0 on success.
Without --create/--add a command only reports what it would do.
        """)

    parser.add_argument('--verbose', '-v', '--debug', action='store_true', help='Enable verbose logging (DEBUG level)')
    parser.add_argument('--log-file', help='Log to file in addition to console')
    parser.add_argument('--version', action='version', version=f'Report Export v{Config.__version__}')

    commands = parser.add_subparsers(dest='command', required=True)

    create = commands.add_parser('create', help='Create a working copy of a template')
    create.add_argument('template_path', help='Template .docx path')
    create.add_argument('--output-dir', default='', help='Directory for the copy')
    create.add_argument('--filename', default='', help='Filename of the copy (.docx is appended if missing)')
    create.add_argument('--project-file', default='', help='Project file whose folder is the default output directory')
    create.add_argument('--create', action='store_true', help='Actually copy the template')

    version = commands.add_parser('version', help='Replace the rows of the version control table')
    version.add_argument('doc_path', help='Working .docx path')
    version.add_argument('--revisie', nargs='+', default=[], help='Revision labels (at least one)')
    version.add_argument('--datum', nargs='*', default=[], help='Dates per revision')
    version.add_argument('--status', nargs='*', default=[], help='Status per revision')
    version.add_argument('--toelichting', nargs='*', default=[], help='Comment per revision')
    version.add_argument('--opsteller', nargs='*', default=[], help='Author per revision')
    version.add_argument('--controleur', nargs='*', default=[], help='Checker per revision')
    version.add_argument('--add', action='store_true', help='Write the rows')

    info = commands.add_parser('info', help='Fill the project information table')
    info.add_argument('doc_path', help='Working .docx path')
    info.add_argument('--project-name', default='')
    info.add_argument('--client', default='')
    info.add_argument('--date', default='', help='Project date; today when empty')
    info.add_argument('--project-version', default='')
    info.add_argument('--author', default='')
    info.add_argument('--checked-by', default='')
    info.add_argument('--add', action='store_true', help='Write the values')

    export = commands.add_parser('export', help='Convert a working document to PDF')
    export.add_argument('doc_path', help='Working .docx path')
    export.add_argument('--engine', choices=['auto', 'word', 'libreoffice'], default=None,
                        help=f'Rendering backend (default: {Config.DOCX_RENDER_ENGINE})')
    export.add_argument('--create', action='store_true', help='Perform the conversion')

    return parser


def run_command(args) -> OperationResult:
    if args.command == 'create':
        return WorkingCopyProvisioner().create(
            args.template_path, args.output_dir, args.filename,
            create=args.create, project_file=args.project_file)
    if args.command == 'version':
        return RevisionTableUpdater().update(
            args.doc_path, args.revisie, args.datum, args.status,
            args.toelichting, args.opsteller, args.controleur, add=args.add)
    if args.command == 'info':
        return ProjectInfoUpdater().update(
            args.doc_path, args.project_name, args.client, args.date,
            args.project_version, args.author, args.checked_by, add=args.add)
    return PdfExporter(engine=args.engine).export(args.doc_path, create=args.create)


def main(argv=None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)
    setup_logging(log_file=args.log_file, verbose=args.verbose)
    logger = get_logger()

    try:
        result = run_command(args)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        return 1

    if result.path:
        print(result.path)
    if result.success:
        logger.debug("Command '%s' succeeded", args.command)
        return 0
    return 1


if __name__ == '__main__':
    sys.exit(main())
