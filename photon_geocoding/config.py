"""
Configuration loading for the Photon client.

Configuration is optional: the client works with defaults. Applications may
keep client and logging settings in TOML files:

    [photon]
    base-url = "${PHOTON_URL}"
    request-timeout = 5

    [logging]
    level = "INFO"
    console = true

``${VAR}`` placeholders are replaced with environment variables.
"""

import logging
import os
import re
from pathlib import Path
from typing import Any, Dict, List, Optional

import tomli

from .exceptions import PhotonConfigError

logger = logging.getLogger(__name__)

ENV_VAR_PATTERN = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_-]*)\}")


def substituteEnvVars(value: Any) -> Any:
    """Recursively replace ``${VAR}`` placeholders with environment values.

    Unknown variables are left untouched.
    """
    if isinstance(value, str):
        return ENV_VAR_PATTERN.sub(lambda match: os.getenv(match.group(1), match.group(0)), value)
    elif isinstance(value, dict):
        return {k: substituteEnvVars(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [substituteEnvVars(item) for item in value]
    return value


def mergeConfigs(baseConfig: Dict[str, Any], newConfig: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge two config dicts, values from newConfig win."""
    merged = baseConfig.copy()
    for key, value in newConfig.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = mergeConfigs(merged[key], value)
        else:
            merged[key] = value
    return merged


def _findTomlFiles(directory: str) -> List[Path]:
    dirPath = Path(directory)
    if not dirPath.is_dir():
        logger.warning(f"Config directory {directory} does not exist, skipping")
        return []
    return sorted(path for path in dirPath.rglob("*.toml") if path.is_file())


def _loadToml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomli.load(f)
    except (OSError, tomli.TOMLDecodeError) as e:
        raise PhotonConfigError(f"Failed to load config {path}: {e}") from e


class ConfigManager:
    """Loads and merges TOML configuration files.

    Example:
        >>> configManager = ConfigManager("photon.toml", configDirs=["conf.d"])
        >>> initLogging(configManager.getLoggingConfig())
        >>> client = PhotonApiClient.fromConfig(configManager.getPhotonConfig())
    """

    def __init__(self, configPath: Optional[str] = "photon.toml", configDirs: Optional[List[str]] = None):
        """Load configuration.

        Args:
            configPath: Main TOML file, may be missing if configDirs are given
            configDirs: Directories scanned recursively for ``*.toml`` files, merged in sorted order

        Raises:
            PhotonConfigError: If nothing can be loaded or a file is invalid
        """
        self.configPath = configPath
        self.configDirs = configDirs or []
        self.config = substituteEnvVars(self._loadConfig())

    def _loadConfig(self) -> Dict[str, Any]:
        config: Dict[str, Any] = {}
        hasConfigFile = self.configPath is not None and Path(self.configPath).is_file()
        if not hasConfigFile and not self.configDirs:
            raise PhotonConfigError(f"Configuration file {self.configPath} not found")

        if hasConfigFile:
            config = _loadToml(Path(str(self.configPath)))
            logger.info(f"Loaded main config from {self.configPath}")

        for configDir in self.configDirs:
            for tomlFile in _findTomlFiles(configDir):
                config = mergeConfigs(config, _loadToml(tomlFile))
                logger.debug(f"Merged config from {tomlFile}")

        return config

    def get(self, key: str, default: Any = None) -> Any:
        """Get top-level configuration value."""
        return self.config.get(key, default)

    def getPhotonConfig(self) -> Dict[str, Any]:
        """Get ``[photon]`` client section."""
        return self.get("photon", {})

    def getLoggingConfig(self) -> Dict[str, Any]:
        """Get ``[logging]`` section."""
        return self.get("logging", {})


def loadConfig(configPath: Optional[str] = "photon.toml", configDirs: Optional[List[str]] = None) -> Dict[str, Any]:
    """Load and merge configuration, shortcut for ``ConfigManager(...).config``."""
    return ConfigManager(configPath, configDirs).config
