################################################################################
# File Name: test_logging_config.py
# Purpose/Description: Tests for logging configuration and utilities
# Author: Michael Cornelison
# Creation Date: 2026-10-19
# Copyright: (c) 2026 Michael Cornelison. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-10-19    | M. Cornelison | Initial implementation
# ================================================================================
################################################################################

"""
Tests for the logging_config module.

Run with:
    pytest tests/test_logging_config.py -v
"""

import logging
import sys
from pathlib import Path

import pytest

srcPath = Path(__file__).parent.parent / 'src'
sys.path.insert(0, str(srcPath))

from common.logging_config import (
    LogContext,
    StructuredFormatter,
    getLogger,
    logWithContext,
    resolveLogLevel,
    setupLogging,
    setupLoggingFromConfig,
)


def _makeRecord(message: str) -> logging.LogRecord:
    """Create a plain INFO log record."""
    return logging.LogRecord(
        name='test', level=logging.INFO, pathname=__file__, lineno=1,
        msg=message, args=None, exc_info=None
    )


class TestStructuredFormatter:
    """Tests for StructuredFormatter."""

    def test_format_withExtra_appendsFields(self):
        """
        Given: Record carrying extra fields
        When: Formatted
        Then: Fields are appended as key=value pairs
        """
        formatter = StructuredFormatter(fmt='%(message)s')
        record = _makeRecord('Suite finished')
        record.extra = {'cases': 4, 'suite': 'math'}

        assert formatter.format(record) == 'Suite finished | cases=4 suite=math'

    def test_format_withoutExtra_isPlainMessage(self):
        """
        Given: Record without extra fields
        When: Formatted
        Then: Only the message is shown
        """
        formatter = StructuredFormatter(fmt='%(message)s')

        assert formatter.format(_makeRecord('plain')) == 'plain'


class TestSetupLogging:
    """Tests for setupLogging()."""

    def test_setupLogging_setsLevel(self, restoreRootLogger):
        """
        Given: Level name DEBUG
        When: setupLogging() is called
        Then: Root logger level is DEBUG
        """
        rootLogger = setupLogging(level='debug')

        assert rootLogger.level == logging.DEBUG

    def test_setupLogging_unknownLevel_defaultsToInfo(self, restoreRootLogger):
        """
        Given: Unknown level name
        When: setupLogging() is called
        Then: Root logger level is INFO
        """
        rootLogger = setupLogging(level='CHATTY')

        assert rootLogger.level == logging.INFO

    def test_setupLogging_unknownLevel_warnsOnStderr(
        self,
        restoreRootLogger,
        capsys: pytest.CaptureFixture
    ):
        """
        Given: Misspelled level name
        When: setupLogging() is called
        Then: A warning naming the level is written to stderr
        """
        setupLogging(level='WARNNG')

        captured = capsys.readouterr()
        assert "Unknown log level 'WARNNG', using INFO" in captured.err
        assert captured.out == ''

    def test_setupLogging_consoleHandler_writesToStderr(self, restoreRootLogger):
        """
        Given: Default setup
        When: setupLogging() is called
        Then: The single console handler writes to stderr
        """
        rootLogger = setupLogging()

        assert len(rootLogger.handlers) == 1
        assert rootLogger.handlers[0].stream is sys.stderr
        assert isinstance(rootLogger.handlers[0].formatter, StructuredFormatter)

    def test_setupLogging_logFile_createsFileHandler(self, restoreRootLogger, tmp_path: Path):
        """
        Given: Log file path in a missing directory
        When: setupLogging() is called and a message is logged
        Then: Directory is created and the message lands in the file
        """
        logFile = tmp_path / 'logs' / 'microtest.log'

        setupLogging(level='INFO', logFile=str(logFile))
        getLogger('microtest.test').info('written to file')
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert 'written to file' in logFile.read_text(encoding='utf-8')


class TestResolveLogLevel:
    """Tests for resolveLogLevel()."""

    @pytest.mark.parametrize('name, expected', [
        ('DEBUG', logging.DEBUG),
        ('warning', logging.WARNING),
        (' error ', logging.ERROR),
    ])
    def test_resolveLogLevel_knownName_returnsConstant(self, name: str, expected: int):
        """
        Given: Level names in any case, with surrounding spaces
        When: resolveLogLevel() is called
        Then: The logging constant is returned
        """
        assert resolveLogLevel(name) == expected

    @pytest.mark.parametrize('name', ['CHATTY', '', None])
    def test_resolveLogLevel_unknownName_returnsNone(self, name):
        """
        Given: Names that are not logging levels
        When: resolveLogLevel() is called
        Then: None is returned
        """
        assert resolveLogLevel(name) is None


class TestSetupLoggingFromConfig:
    """Tests for setupLoggingFromConfig()."""

    def test_setupLoggingFromConfig_usesConfiguredLevel(self, restoreRootLogger):
        """
        Given: Config with logging level WARNING
        When: setupLoggingFromConfig() is called
        Then: Root level is WARNING with console output only
        """
        rootLogger = setupLoggingFromConfig({'logging': {'level': 'WARNING', 'file': ''}})

        assert rootLogger.level == logging.WARNING
        assert len(rootLogger.handlers) == 1

    def test_setupLoggingFromConfig_verbose_forcesDebug(self, restoreRootLogger):
        """
        Given: Config with logging level ERROR
        When: setupLoggingFromConfig() is called with verbose=True
        Then: Root level is DEBUG
        """
        rootLogger = setupLoggingFromConfig({'logging': {'level': 'ERROR'}}, verbose=True)

        assert rootLogger.level == logging.DEBUG

    def test_setupLoggingFromConfig_noSection_defaultsToInfo(self, restoreRootLogger):
        """
        Given: Config without a logging section
        When: setupLoggingFromConfig() is called
        Then: Root level is INFO
        """
        assert setupLoggingFromConfig({}).level == logging.INFO

    def test_setupLoggingFromConfig_file_addsFileHandler(
        self,
        restoreRootLogger,
        tmp_path: Path
    ):
        """
        Given: Config naming a log file
        When: setupLoggingFromConfig() is called
        Then: A file handler writing to that path is installed
        """
        logFile = tmp_path / 'run.log'

        rootLogger = setupLoggingFromConfig({'logging': {'file': str(logFile)}})

        fileHandlers = [h for h in rootLogger.handlers if isinstance(h, logging.FileHandler)]
        assert len(fileHandlers) == 1
        assert fileHandlers[0].baseFilename == str(logFile)


class TestLogHelpers:
    """Tests for logWithContext() and LogContext."""

    def test_logWithContext_appendsContext(self, caplog: pytest.LogCaptureFixture):
        """
        Given: Context fields
        When: logWithContext() is called
        Then: Message carries the fields at the requested level
        """
        logger = getLogger('microtest.test')

        with caplog.at_level(logging.WARNING, logger='microtest.test'):
            logWithContext(logger, 'warning', 'Test run FAILED', totalFailing=1)

        assert caplog.records[-1].levelname == 'WARNING'
        assert caplog.records[-1].getMessage() == 'Test run FAILED | totalFailing=1'

    def test_logWithContext_unknownLevel_logsInfo(self, caplog: pytest.LogCaptureFixture):
        """
        Given: Unknown level name
        When: logWithContext() is called
        Then: Message is logged at INFO
        """
        logger = getLogger('microtest.test')

        with caplog.at_level(logging.INFO, logger='microtest.test'):
            logWithContext(logger, 'loud', 'hello')

        assert caplog.records[-1].levelname == 'INFO'

    def test_logContext_addsExtraAndRestoresFactory(self):
        """
        Given: LogContext with a suite field
        When: Records are created inside and after the block
        Then: Only records inside carry the field
        """
        originalFactory = logging.getLogRecordFactory()

        with LogContext(suite='math_suite'):
            inside = logging.getLogRecordFactory()(
                'test', logging.INFO, __file__, 1, 'inside', None, None
            )

        assert inside.extra == {'suite': 'math_suite'}
        assert logging.getLogRecordFactory() is originalFactory
