################################################################################
# File Name: config_loader.py
# Purpose/Description: Configuration file loading with environment placeholders
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
Configuration loading module.

Provides loading of JSON configuration files with:
- Environment variables loaded from a .env file (python-dotenv)
- ${VAR_NAME} placeholders resolved from the environment
- Default values via ${VAR_NAME:default}

Usage:
    from common.config_loader import loadConfigFile

    config = loadConfigFile('microtest_config.json', envPath='.env')
"""

import json
import logging
import os
import re
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import dotenv_values

logger = logging.getLogger(__name__)

# Pattern to match ${VAR_NAME} or ${VAR_NAME:default}
PLACEHOLDER_PATTERN = re.compile(r'\$\{([^}:]+)(?::([^}]*))?\}')


def loadEnvFile(envPath: Optional[str] = None) -> Dict[str, str]:
    """
    Load environment variables from .env file.

    Args:
        envPath: Path to .env file. Defaults to .env in current directory.

    Returns:
        Dictionary of the variable names that were loaded

    Note:
        Does not override existing environment variables.
    """
    if envPath is None:
        envPath = '.env'

    loadedVars: Dict[str, str] = {}

    if not Path(envPath).exists():
        logger.debug(f".env file not found at {envPath}")
        return loadedVars

    for key, value in dotenv_values(envPath).items():
        if value is None or key in os.environ:
            continue
        os.environ[key] = value
        loadedVars[key] = '[LOADED]'

    logger.info(f"Loaded {len(loadedVars)} variables from {envPath}")
    return loadedVars


def resolvePlaceholders(config: Any) -> Any:
    """
    Recursively resolve ${VAR_NAME} placeholders in configuration.

    Args:
        config: Configuration value (dict, list, str, or other)

    Returns:
        Configuration with placeholders resolved
    """
    if isinstance(config, dict):
        return {key: resolvePlaceholders(value) for key, value in config.items()}

    elif isinstance(config, list):
        return [resolvePlaceholders(item) for item in config]

    elif isinstance(config, str):
        return _resolveString(config)

    else:
        return config


def _resolveString(value: str) -> str:
    """
    Resolve placeholders in a string value.

    Args:
        value: String potentially containing ${VAR} placeholders

    Returns:
        String with placeholders resolved
    """
    def replacer(match: re.Match) -> str:
        varName = match.group(1)
        defaultValue = match.group(2)

        envValue = os.environ.get(varName)

        if envValue is not None:
            logger.debug(f"Resolved {varName} from environment")
            return envValue
        elif defaultValue is not None:
            logger.debug(f"Using default for {varName}")
            return defaultValue
        else:
            logger.warning(f"Environment variable {varName} not set and no default")
            return match.group(0)

    return PLACEHOLDER_PATTERN.sub(replacer, value)


def loadConfigFile(
    configPath: str,
    envPath: Optional[str] = None
) -> Dict[str, Any]:
    """
    Load configuration file and resolve all placeholders.

    Args:
        configPath: Path to configuration JSON file
        envPath: Optional path to .env file

    Returns:
        Configuration dictionary with placeholders resolved

    Raises:
        FileNotFoundError: If config file doesn't exist
        json.JSONDecodeError: If config file is invalid JSON
    """
    loadEnvFile(envPath)

    configFile = Path(configPath)
    if not configFile.exists():
        raise FileNotFoundError(f"Configuration file not found: {configPath}")

    logger.debug(f"Loading configuration from {configPath}")

    with open(configFile, 'r', encoding='utf-8') as f:
        config = json.load(f)

    return resolvePlaceholders(config)
