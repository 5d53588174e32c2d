################################################################################
# File Name: main.py
# Purpose/Description: Command-line entry point for running a microtest suite
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
Main application entry point.

Runs one explicitly named suite file and prints its report:
- CLI argument parsing
- Configuration loading and validation
- Suite loading and execution
- Error handling and exit codes

A suite is a Python file defining `runSuite(recorder)`, which records its
test cases through the given TestRecorder.

Usage:
    python src/main.py path/to/suite.py
    python src/main.py path/to/suite.py --config microtest_config.json
    python src/main.py path/to/suite.py --only-failing --verbose
"""

import argparse
import importlib.util
import sys
from pathlib import Path
from types import ModuleType
from typing import Any, Callable, List, Optional

# Resolve project paths relative to this script (not CWD)
srcPath = Path(__file__).resolve().parent
if str(srcPath) not in sys.path:
    sys.path.insert(0, str(srcPath))

from common.config_loader import loadConfigFile
from common.config_validator import ConfigValidationError, validateConfig
from common.error_handler import ConfigurationError, formatError, handleError
from common.logging_config import LogContext, getLogger, setupLogging, setupLoggingFromConfig
from microtest import (
    EXIT_FAILED,
    MicrotestError,
    OutputMode,
    TestRecorder,
    __version__,
    createRecorderFromConfig,
)

SUITE_ENTRY_POINT = 'runSuite'

# Exit codes
EXIT_SUCCESS = 0
EXIT_CONFIG_ERROR = 1
EXIT_TEST_FAILURE = EXIT_FAILED
EXIT_FRAMEWORK_ERROR = 3
EXIT_UNKNOWN_ERROR = 4


def parseArgs(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command line arguments.

    Args:
        argv: Argument list (default: sys.argv[1:])

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        prog='microtest',
        description='Run a microtest suite and print its pass/fail report',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Examples:
  microtest suite.py                      Run with default settings
  microtest suite.py --config my.json     Run with custom config
  microtest suite.py --only-failing       Show detail for failing cases only
  microtest suite.py --verbose            Run with debug logging
        '''
    )

    parser.add_argument(
        'suite',
        help='Path to a suite file defining runSuite(recorder)'
    )

    parser.add_argument(
        '--config', '-c',
        default=None,
        help='Path to JSON configuration file (default: built-in defaults)'
    )

    parser.add_argument(
        '--env-file', '-e',
        default=None,
        help='Path to environment file used to resolve ${VAR} placeholders in --config'
    )

    modeGroup = parser.add_mutually_exclusive_group()
    modeGroup.add_argument(
        '--only-failing',
        action='store_const',
        const=OutputMode.SHOW_ONLY_FAILING.value,
        dest='outputMode',
        help='Show comparison detail only for failing test cases'
    )
    modeGroup.add_argument(
        '--show-all',
        action='store_const',
        const=OutputMode.SHOW_ALL.value,
        dest='outputMode',
        help='Show comparison detail for every test case'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose (debug) logging'
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )

    args = parser.parse_args(argv)

    # Only a config file has placeholders to resolve
    if args.env_file and not args.config:
        parser.error('--env-file requires --config')

    return args


def loadConfiguration(
    configPath: str | None,
    envPath: str | None = None
) -> dict:
    """
    Load and validate configuration.

    Args:
        configPath: Path to configuration file, or None for defaults only
        envPath: Path to environment file

    Returns:
        Validated configuration dictionary

    Raises:
        ConfigurationError: If configuration is invalid
    """
    logger = getLogger(__name__)

    try:
        config = loadConfigFile(configPath, envPath) if configPath else {}
        config = validateConfig(config)

        logger.debug(f"Configuration loaded from {configPath or 'defaults'}")
        return config

    except FileNotFoundError as e:
        raise ConfigurationError(f"Configuration file not found: {e}") from e
    except ValueError as e:
        raise ConfigurationError(f"Configuration file is not valid JSON: {e}") from e
    except ConfigValidationError as e:
        raise ConfigurationError(f"Configuration validation failed: {e}") from e


def loadSuite(suitePath: str) -> Callable[[TestRecorder], Any]:
    """
    Load the suite entry point from a Python file.

    Args:
        suitePath: Path to the suite file

    Returns:
        The suite's runSuite function

    Raises:
        FileNotFoundError: If the suite file does not exist
        AttributeError: If the suite does not define runSuite
    """
    path = Path(suitePath)
    if not path.is_file():
        raise FileNotFoundError(f"Suite file not found: {suitePath}")

    moduleSpec = importlib.util.spec_from_file_location(f'microtest_suite_{path.stem}', path)
    module: ModuleType = importlib.util.module_from_spec(moduleSpec)
    moduleSpec.loader.exec_module(module)

    entryPoint = getattr(module, SUITE_ENTRY_POINT, None)
    if not callable(entryPoint):
        raise AttributeError(f"Suite {suitePath} does not define {SUITE_ENTRY_POINT}(recorder)")

    return entryPoint


def runSuiteFile(
    suitePath: str,
    config: dict,
    outputMode: str | None = None
) -> int:
    """
    Run a suite and print its report.

    A framework error raised by the suite stops the suite; the comparisons
    recorded before it are still reported.

    Args:
        suitePath: Path to the suite file
        config: Validated configuration dictionary
        outputMode: Output mode overriding the configuration

    Returns:
        Exit code
    """
    logger = getLogger(__name__)

    suite = loadSuite(suitePath)
    recorder = createRecorderFromConfig(config)
    if outputMode is not None:
        recorder.configureOutputMode(outputMode)

    with LogContext(suite=Path(suitePath).name):
        logger.info("Running suite")
        try:
            suite(recorder)
        except MicrotestError as e:
            logger.error(f"Suite stopped by framework error: {formatError(e)}")
            recorder.showResults()
            return EXIT_FRAMEWORK_ERROR

        recorder.showResults()

    return recorder.exitCode()


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point.

    Args:
        argv: Argument list (default: sys.argv[1:])

    Returns:
        Exit code (0 when every comparison passed, non-zero otherwise)
    """
    args = parseArgs(argv)

    setupLogging(level='DEBUG' if args.verbose else 'WARNING')
    logger = getLogger(__name__)

    try:
        config = loadConfiguration(args.config, args.env_file)
        setupLoggingFromConfig(config, verbose=args.verbose)

        return runSuiteFile(args.suite, config, outputMode=args.outputMode)

    except ConfigurationError as e:
        logger.error(f"Configuration error: {formatError(e)}")
        return EXIT_CONFIG_ERROR

    except KeyboardInterrupt:
        logger.warning("Suite interrupted by user")
        return EXIT_UNKNOWN_ERROR

    except Exception as e:
        handleError(e, context={'suite': args.suite}, reraise=False)
        return EXIT_UNKNOWN_ERROR


if __name__ == '__main__':
    sys.exit(main())
