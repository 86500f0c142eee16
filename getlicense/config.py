import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from .errors import ConfigError

GITHUB_API_URL: str = "https://api.github.com"
LICENSES_ENDPOINT: str = "/licenses"
REQUEST_TIMEOUT: float = 15

LICENSE_DIRECTORY: str = ".license"
DATA_DIRECTORY: str = "data"
RAW_DIRECTORY: str = "raw"
TEMPLATES_DIRECTORY: str = "templates"
INDEX_FILE: str = "index.json"
TEMP_DIR_PREFIX: str = "license-"

CONFIG_ENV_VAR: str = "GETLICENSE_CONFIG"
API_URL_ENV_VAR: str = "GETLICENSE_API_URL"
TOKEN_ENV_VAR: str = "GITHUB_TOKEN"


@dataclass
class Settings:
    """
    Runtime settings for talking to the license API and locating the cache.
    cacheDir of None means the default ~/.license directory.
    """

    apiUrl: str = GITHUB_API_URL
    token: str | None = field(default=None, repr=False)
    timeout: float = REQUEST_TIMEOUT
    cacheDir: Path | None = None


def LoadSettings(configPath: Path | None = None) -> Settings:
    """
    Builds settings from an optional YAML file and the environment.
    Parameters
    ----------
    configPath : Path | None, optional
        YAML file with api_url, token, timeout and cache_dir keys. Falls back to
        the GETLICENSE_CONFIG environment variable when omitted.
    Returns
    -------
    Settings
        File values overridden by GITHUB_TOKEN and GETLICENSE_API_URL.
    """

    settings = Settings()

    if configPath is None and (envPath := os.environ.get(CONFIG_ENV_VAR)):
        configPath = Path(envPath)

    if configPath is not None:
        fileValues = ReadConfigFile(configPath)

        if "api_url" in fileValues:
            settings.apiUrl = str(fileValues["api_url"]).rstrip("/")

        if fileValues.get("token"):
            settings.token = str(fileValues["token"])

        if "timeout" in fileValues:

            try:
                settings.timeout = float(fileValues["timeout"])

            except (TypeError, ValueError):
                raise ConfigError(
                    f"Invalid timeout in {configPath}: {fileValues['timeout']!r}"
                ) from None

        if fileValues.get("cache_dir"):
            settings.cacheDir = Path(str(fileValues["cache_dir"])).expanduser()

    if token := os.environ.get(TOKEN_ENV_VAR):
        settings.token = token

    if apiUrl := os.environ.get(API_URL_ENV_VAR):
        settings.apiUrl = apiUrl.rstrip("/")

    return settings


def ReadConfigFile(configPath: Path) -> dict[str, object]:

    try:
        content = configPath.read_text(encoding="utf-8")

    except OSError as e:
        raise ConfigError(f"Cannot read config {configPath}: {e}") from e

    try:
        values = yaml.safe_load(content) or {}

    except yaml.YAMLError as e:
        raise ConfigError(f"YAML parse {configPath}: {e}") from e

    if not isinstance(values, dict):
        raise ConfigError(f"Config {configPath} must be a mapping")

    return values
