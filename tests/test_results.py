"""
Unit tests for result objects and logging setup.
"""

import logging
import unittest

from report_export.core.results import MessageLevel, OperationResult, WorkingCopyResult
from report_export.utils.logging_config import get_module_logger, setup_logging
from tests.test_config import BaseTestCase


class TestOperationResult(unittest.TestCase):

    def test_messages_by_level(self):
        result = OperationResult()
        result.error('e')
        result.warning('w')
        result.remark('r')
        self.assertEqual(result.errors, ['e'])
        self.assertEqual(result.warnings, ['w'])
        self.assertEqual(result.remarks, ['r'])
        self.assertEqual(str(result.messages[0]), '[error] e')

    def test_fail_resets_outputs(self):
        result = WorkingCopyResult(path='x.docx', success=True, template_path='t.docx')
        returned = result.fail('broken')
        self.assertIs(returned, result)
        self.assertEqual(result.path, '')
        self.assertFalse(result.success)
        self.assertEqual(result.template_path, 't.docx')

    def test_messages_are_logged(self):
        logger = logging.getLogger('report_export.tests.results')
        result = OperationResult(logger=logger)
        with self.assertLogs(logger, level='INFO') as logs:
            result.error('bad')
            result.warning('odd')
            result.remark('fine')
        self.assertEqual([r.levelno for r in logs.records],
                         [logging.ERROR, logging.WARNING, logging.INFO])
        self.assertEqual([m.level for m in result.messages],
                         [MessageLevel.ERROR, MessageLevel.WARNING, MessageLevel.REMARK])


class TestLoggingSetup(BaseTestCase):

    def tearDown(self):
        logger = logging.getLogger('report_export')
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        super().tearDown()

    def test_setup_is_idempotent_and_writes_log_file(self):
        log_file = self.path('run.log')
        setup_logging(log_file=log_file, verbose=True)
        logger = setup_logging(log_file=log_file, verbose=True)

        self.assertEqual(len(logger.handlers), 2)
        self.assertEqual(logger.level, logging.DEBUG)
        get_module_logger('report_export.core').debug('hello')
        for handler in logger.handlers:
            handler.flush()
        with open(log_file, encoding='utf-8') as f:
            self.assertIn('hello', f.read())

    def test_module_logger_is_nested(self):
        self.assertEqual(get_module_logger('tests.x').name, 'report_export.tests.x')
        self.assertEqual(get_module_logger('report_export.core').name, 'report_export.core')


if __name__ == '__main__':
    unittest.main()
