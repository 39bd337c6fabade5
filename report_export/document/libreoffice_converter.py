"""
LibreOffice automation for DOCX to PDF conversion.
"""

import os
import shutil
import subprocess
from typing import Optional

from ..core.config import Config
from ..utils.logging_config import get_converter_logger
from .converter import ConversionError, Converter, ConverterUnavailableError, pdf_path_for


class LibreOfficeConverter(Converter):
    """Handles DOCX to PDF conversion using headless LibreOffice."""

    name = 'libreoffice'

    def __init__(self, executable: Optional[str] = None):
        self.executable = executable or Config.LIBREOFFICE_EXECUTABLE
        self.logger = get_converter_logger()

    def is_available(self) -> bool:
        return shutil.which(self.executable) is not None

    def convert(self, input_path: str, output_path: Optional[str] = None) -> str:
        output_path = os.path.abspath(output_path or pdf_path_for(input_path))
        output_dir = os.path.dirname(output_path)

        if not self.is_available():
            raise ConverterUnavailableError(
                f"LibreOffice is not installed (could not find '{self.executable}').")

        self.logger.info("Converting DOCX to PDF using LibreOffice...")
        self.logger.debug("Input: %s", input_path)
        self.logger.debug("Output: %s", output_path)

        cmd = [
            self.executable,
            '--headless',
            '--norestore',
            '--convert-to', 'pdf',
            '--outdir', output_dir,
            os.path.abspath(input_path),
        ]
        try:
            result = subprocess.run(cmd, stdout=subprocess.PIPE, stderr=subprocess.PIPE,
                                    timeout=Config.LIBREOFFICE_TIMEOUT)
        except OSError as e:
            raise ConverterUnavailableError(f"Could not start LibreOffice: {e}", e) from e

        if result.returncode != 0:
            stderr = result.stderr.decode(errors='replace').strip()
            raise ConversionError(f"LibreOffice conversion failed: {stderr}")

        # LibreOffice always names the output after the input file
        produced = os.path.join(output_dir, os.path.splitext(os.path.basename(input_path))[0] + Config.PDF_EXTENSION)
        if os.path.normcase(produced) != os.path.normcase(output_path) and os.path.exists(produced):
            os.replace(produced, output_path)

        self.logger.info("Converted '%s' to PDF with LibreOffice", os.path.basename(input_path))
        return output_path
