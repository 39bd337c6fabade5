"""
Unit tests for the Word automation backend with COM mocked out.
"""

import os
import sys
import unittest
from unittest.mock import MagicMock, patch

from report_export.core.config import Config
from report_export.document.converter import ConversionError, ConverterUnavailableError
from report_export.document.word_converter import WordConverter, _load_com


class FakeComError(Exception):
    pass


class TestWordConverter(unittest.TestCase):
    """Test cases for WordConverter.convert."""

    def setUp(self):
        self.pythoncom = MagicMock()
        self.pythoncom.com_error = FakeComError
        self.client = MagicMock()
        self.word_app = self.client.DispatchEx.return_value
        self.doc = self.word_app.Documents.Open.return_value

        patcher = patch('report_export.document.word_converter._load_com',
                        return_value=(self.pythoncom, self.client))
        patcher.start()
        self.addCleanup(patcher.stop)

        self.converter = WordConverter()
        self.docx = os.path.abspath('report.docx')
        self.pdf = os.path.abspath('report.pdf')

    def test_export_sequence(self):
        result = self.converter.convert('report.docx')

        self.assertEqual(result, self.pdf)
        self.client.DispatchEx.assert_called_once_with(Config.WORD_PROG_ID)
        self.assertFalse(self.word_app.Visible)
        self.assertEqual(self.word_app.DisplayAlerts, 0)
        self.word_app.Documents.Open.assert_called_once_with(
            FileName=self.docx, ReadOnly=True, AddToRecentFiles=False)

        kwargs = self.doc.ExportAsFixedFormat.call_args.kwargs
        self.assertEqual(kwargs['OutputFileName'], self.pdf)
        self.assertEqual(kwargs['ExportFormat'], 17)
        self.assertEqual(kwargs['CreateBookmarks'], 1)
        self.assertTrue(kwargs['DocStructureTags'])
        self.assertFalse(kwargs['OpenAfterExport'])

        self.doc.Close.assert_called_once_with(SaveChanges=0)
        self.word_app.Quit.assert_called_once_with()
        self.pythoncom.CoInitialize.assert_called_once_with()
        self.pythoncom.CoUninitialize.assert_called_once_with()

    def test_explicit_output_path(self):
        self.assertEqual(self.converter.convert('report.docx', 'out.pdf'), os.path.abspath('out.pdf'))

    def test_export_failure_still_cleans_up(self):
        self.doc.ExportAsFixedFormat.side_effect = FakeComError('export failed')

        with self.assertRaises(ConversionError) as ctx:
            self.converter.convert('report.docx')

        self.assertIn('export failed', str(ctx.exception))
        self.doc.Close.assert_called_once_with(SaveChanges=0)
        self.word_app.Quit.assert_called_once_with()
        self.pythoncom.CoUninitialize.assert_called_once_with()

    def test_inner_com_description_is_kept(self):
        error = FakeComError('Exception occurred.')
        error.excepinfo = (0, 'Microsoft Word', 'The file is in use.', None, 0, -2146822494)
        self.word_app.Documents.Open.side_effect = error

        with self.assertRaises(ConversionError) as ctx:
            self.converter.convert('report.docx')

        self.assertEqual(str(ctx.exception.inner), 'The file is in use.')
        self.doc.Close.assert_not_called()
        self.word_app.Quit.assert_called_once_with()

    def test_word_not_installed(self):
        self.client.DispatchEx.side_effect = FakeComError('Invalid class string')

        with self.assertRaises(ConverterUnavailableError):
            self.converter.convert('report.docx')

        self.word_app.Quit.assert_not_called()
        self.pythoncom.CoUninitialize.assert_called_once_with()

    def test_close_error_does_not_block_quit(self):
        self.doc.Close.side_effect = FakeComError('close failed')

        self.assertEqual(self.converter.convert('report.docx'), self.pdf)
        self.word_app.Quit.assert_called_once_with()

    def test_is_available_on_windows(self):
        with patch('report_export.document.word_converter.sys') as mock_sys:
            mock_sys.platform = 'win32'
            self.assertTrue(self.converter.is_available())

            self.pythoncom.MakeIID.side_effect = FakeComError('Invalid class string')
            self.assertFalse(self.converter.is_available())

    def test_is_not_available_elsewhere(self):
        with patch('report_export.document.word_converter.sys') as mock_sys:
            mock_sys.platform = 'linux'
            self.assertFalse(self.converter.is_available())


class TestLoadCom(unittest.TestCase):

    def test_missing_pywin32(self):
        with patch.dict(sys.modules, {'pythoncom': None, 'win32com': None, 'win32com.client': None}):
            with self.assertRaises(ConverterUnavailableError):
                _load_com()


if __name__ == '__main__':
    unittest.main()
