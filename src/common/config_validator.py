################################################################################
# File Name: config_validator.py
# Purpose/Description: Configuration validation with defaults and field types
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
Configuration validation module.

Provides validation of configuration files with:
- Default value application
- Field type checking
- Nested configuration support
- Clear error messages for invalid fields

Every microtest setting is optional, so validation fills in defaults and
then checks that each known field has the expected type.

Usage:
    from common.config_validator import ConfigValidator

    validator = ConfigValidator()
    config = validator.validate(rawConfig)
"""

from typing import Any, Dict, List, Optional
import copy
import logging

logger = logging.getLogger(__name__)


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""

    def __init__(self, message: str, invalidFields: Optional[List[str]] = None):
        super().__init__(message)
        self.invalidFields = invalidFields or []


# Default values for optional settings (dot notation)
DEFAULTS: Dict[str, Any] = {
    'logging.level': 'INFO',
    'microtest.outputMode': 'showAll',
    'microtest.maxTestCases': 99,
    'microtest.maxComparisonsPerTestCase': 99,
}

# Expected type of each known setting; absent settings are allowed
FIELD_TYPES: Dict[str, type] = {
    'logging.level': str,
    'logging.file': str,
    'microtest.outputMode': str,
    'microtest.maxTestCases': int,
    'microtest.maxComparisonsPerTestCase': int,
}


class ConfigValidator:
    """
    Validates configuration dictionaries.

    Attributes:
        defaults: Dictionary of default values for optional fields
        fieldTypes: Dictionary of expected field types
    """

    def __init__(
        self,
        defaults: Optional[Dict[str, Any]] = None,
        fieldTypes: Optional[Dict[str, type]] = None
    ):
        """
        Initialize the validator.

        Args:
            defaults: Dictionary of default values in dot notation
            fieldTypes: Dictionary of expected types in dot notation
                (e.g., {'microtest.maxTestCases': int})
        """
        self.defaults = defaults if defaults is not None else DEFAULTS
        self.fieldTypes = fieldTypes if fieldTypes is not None else FIELD_TYPES

    def validate(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """
        Validate and enhance configuration.

        Args:
            config: Raw configuration dictionary

        Returns:
            Validated copy of the configuration with defaults applied

        Raises:
            ConfigValidationError: If a field has the wrong type
        """
        config = self._applyDefaults(copy.deepcopy(config))

        invalidFields = [
            key for key, expectedType in self.fieldTypes.items()
            if not self.validateField(config, key, expectedType, allowNone=True)
        ]
        if invalidFields:
            details = ', '.join(
                f"{key} (expected {self.fieldTypes[key].__name__})"
                for key in invalidFields
            )
            raise ConfigValidationError(
                f"Invalid configuration fields: {details}",
                invalidFields=invalidFields
            )

        logger.debug("Configuration validated successfully")
        return config

    def _applyDefaults(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """
        Apply default values for missing optional fields.

        Args:
            config: Configuration dictionary

        Returns:
            Configuration with defaults applied
        """
        for key, defaultValue in self.defaults.items():
            if self._getNestedValue(config, key) is None:
                self._setNestedValue(config, key, defaultValue)
                logger.debug(f"Applied default for {key}: {defaultValue}")

        return config

    def _getNestedValue(self, config: Dict[str, Any], key: str) -> Any:
        """
        Get a value from nested dictionary using dot notation.

        Args:
            config: Configuration dictionary
            key: Dot-notation key (e.g., 'microtest.outputMode')

        Returns:
            Value if found, None otherwise
        """
        value = config

        for k in key.split('.'):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return None

        return value

    def _setNestedValue(self, config: Dict[str, Any], key: str, value: Any) -> None:
        """Set a value in nested dictionary using dot notation."""
        keys = key.split('.')
        current = config

        for k in keys[:-1]:
            if not isinstance(current.get(k), dict):
                current[k] = {}
            current = current[k]

        current[keys[-1]] = value

    def validateField(
        self,
        config: Dict[str, Any],
        key: str,
        expectedType: type,
        allowNone: bool = False
    ) -> bool:
        """
        Validate a specific field's type.

        bool values are not accepted where int is expected.

        Args:
            config: Configuration dictionary
            key: Dot-notation key to validate
            expectedType: Expected Python type
            allowNone: Whether a missing or null value is acceptable

        Returns:
            True if valid, False otherwise
        """
        value = self._getNestedValue(config, key)

        if value is None:
            return allowNone

        if isinstance(value, bool) and expectedType is not bool:
            return False

        return isinstance(value, expectedType)


def validateConfig(config: Dict[str, Any]) -> Dict[str, Any]:
    """
    Convenience function to validate configuration.

    Args:
        config: Raw configuration dictionary

    Returns:
        Validated configuration

    Raises:
        ConfigValidationError: If validation fails
    """
    validator = ConfigValidator()
    return validator.validate(config)
