################################################################################
# File Name: __init__.py
# Purpose/Description: Common utilities package initialization
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
Common utilities package.

This package provides shared functionality used across the application:
- Configuration validation and loading
- Logging configuration
- Error handling

Usage:
    from common.config_validator import ConfigValidator
    from common.config_loader import loadConfigFile
    from common.logging_config import getLogger
    from common.error_handler import ConfigurationError
"""

from .config_loader import loadConfigFile
from .config_validator import ConfigValidator
from .error_handler import ConfigurationError, DataError, handleError
from .logging_config import getLogger, setupLogging, setupLoggingFromConfig

__all__ = [
    'ConfigValidator',
    'loadConfigFile',
    'getLogger',
    'setupLogging',
    'setupLoggingFromConfig',
    'ConfigurationError',
    'DataError',
    'handleError'
]
