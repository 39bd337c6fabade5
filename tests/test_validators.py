"""
Unit tests for the Validators utility class.
"""

import unittest
from pathlib import Path

from report_export.utils.validators import Validators
from tests.test_config import BaseTestCase, TestUtils


class TestValidators(BaseTestCase):
    """Test cases for Validators class."""

    def setUp(self):
        super().setUp()
        self.validators = Validators()

    def test_validate_docx_path_valid(self):
        path = TestUtils.create_docx(self.path('report.docx'), [])
        result = self.validators.validate_docx_path(path)
        self.assertTrue(result['valid'])
        self.assertTrue(result['is_docx'])
        self.assertEqual(result['path'], path)
        self.assertIsNone(result['error_message'])

    def test_validate_docx_path_accepts_path_objects(self):
        path = TestUtils.create_docx(self.path('report.docx'), [])
        result = self.validators.validate_docx_path(Path(path))
        self.assertTrue(result['valid'])
        self.assertEqual(result['path'], path)
        self.assertIsInstance(result['path'], str)

    def test_validate_docx_path_rejects_non_paths(self):
        result = self.validators.validate_docx_path(3.5)
        self.assertFalse(result['valid'])
        self.assertIn('not a valid path', result['error_message'])

    def test_validate_docx_path_empty(self):
        for value in (None, '', '   '):
            result = self.validators.validate_docx_path(value)
            self.assertFalse(result['valid'])
            self.assertEqual(result['error_message'], "DocPath is empty.")

    def test_validate_docx_path_missing(self):
        result = self.validators.validate_docx_path(self.path('missing.docx'))
        self.assertFalse(result['valid'])
        self.assertIn('Document not found', result['error_message'])

    def test_validate_docx_path_directory(self):
        result = self.validators.validate_docx_path(self.temp_dir)
        self.assertFalse(result['valid'])

    def test_validate_docx_path_other_extension_is_flagged_not_rejected(self):
        path = self.path('report.docm')
        open(path, 'wb').close()
        result = self.validators.validate_docx_path(path)
        self.assertTrue(result['valid'])
        self.assertFalse(result['is_docx'])

    def test_validate_pdf_output_valid(self):
        path = TestUtils.create_pdf(self.path('report.pdf'), pages=3)
        result = self.validators.validate_pdf_output(path)
        self.assertTrue(result['valid'])
        self.assertEqual(result['page_count'], 3)

    def test_validate_pdf_output_missing(self):
        result = self.validators.validate_pdf_output(self.path('missing.pdf'))
        self.assertFalse(result['valid'])
        self.assertIn('PDF was not created', result['error_message'])

    def test_validate_pdf_output_invalid(self):
        path = self.path('broken.pdf')
        with open(path, 'wb') as f:
            f.write(b'this is not a pdf')
        result = self.validators.validate_pdf_output(path)
        self.assertFalse(result['valid'])
        self.assertIsNotNone(result['error_message'])


if __name__ == '__main__':
    unittest.main()
