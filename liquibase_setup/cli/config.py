"""
Settings resolution for the CLI.

Settings merge in increasing precedence: YAML configuration file, CI runner
inputs (INPUT_* variables), command-line flags. The license key is only ever
read from the LIQUIBASE_LICENSE_KEY environment variable.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from liquibase_setup.core.exceptions import ConfigurationError
from liquibase_setup.core.runner import RunnerEnvironment
from liquibase_setup.install.models import Edition, InstallRequest

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILENAME = "liquibase-setup.yaml"
LICENSE_KEY_ENV = "LIQUIBASE_LICENSE_KEY"

_TRUE_VALUES = {"true", "yes", "1", "on"}
_FALSE_VALUES = {"false", "no", "0", "off"}


@dataclass
class Settings:
    """Fully merged settings for one run."""

    version: Optional[str] = None
    edition: Edition = Edition.OSS
    cache: bool = True
    license_key: Optional[str] = None
    download_urls: Dict[str, str] = field(default_factory=dict)

    def to_request(self) -> InstallRequest:
        """
        Raises:
            ConfigurationError: If no version was configured
        """
        if not self.version:
            raise ConfigurationError(
                "No Liquibase version specified. Set 'version' in the configuration "
                "file, the 'version' action input, or pass --liquibase-version"
            )
        return InstallRequest(
            version=self.version,
            edition=self.edition,
            license_key=self.license_key,
            use_cache=self.cache,
        )


def load_yaml_config(config_file: Path, required: bool = False) -> Dict[str, Any]:
    """
    Load and parse a YAML configuration file.

    Returns:
        Configuration dictionary (empty dict if file doesn't exist and not required)

    Raises:
        ConfigurationError: If the file is required but missing, or invalid
    """
    if not config_file.exists():
        if required:
            raise ConfigurationError(f"Configuration file not found: {config_file}")
        logger.debug(f"Config file not found (optional): {config_file}")
        return {}

    logger.debug(f"Loading configuration from {config_file}")

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {config_file}: {e}") from e

    config = config or {}
    if not isinstance(config, dict):
        raise ConfigurationError(f"Configuration in {config_file} must be a mapping")
    return config


def parse_bool(value: Any, name: str) -> bool:
    """
    Interpret a boolean input.

    Raises:
        ConfigurationError: If value is not a recognised boolean spelling
    """
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise ConfigurationError(
        f"Invalid boolean value for {name}: {value!r}. Use true or false"
    )


def resolve_settings(
    config_file: Optional[Path] = None,
    environment: Optional[RunnerEnvironment] = None,
    version: Optional[str] = None,
    edition: Optional[str] = None,
    cache: Optional[bool] = None,
    project_root: Optional[Path] = None,
) -> Settings:
    """
    Merge configuration file, runner inputs and explicit arguments.

    Args:
        config_file: Explicit config file (must exist). If None, uses
            liquibase-setup.yaml in project_root when present.
        environment: Runner environment to read inputs from
        version: Version from the command line
        edition: Edition from the command line
        cache: Cache flag from the command line
        project_root: Directory searched for the default config file

    Raises:
        ConfigurationError: On invalid files or values
        InvalidEditionError: On an unknown edition name
    """
    environment = environment or RunnerEnvironment()

    if config_file is not None:
        config = load_yaml_config(Path(config_file), required=True)
    else:
        root = Path(project_root) if project_root else Path.cwd()
        config = load_yaml_config(root / DEFAULT_CONFIG_FILENAME)

    settings = Settings()
    _apply(settings, config, source="configuration file")
    _apply(
        settings,
        {
            "version": environment.get_input("version"),
            "edition": environment.get_input("edition"),
            "cache": environment.get_input("cache"),
        },
        source="action input",
    )
    _apply(
        settings,
        {"version": version, "edition": edition, "cache": cache},
        source="command line",
    )

    settings.license_key = environment.environ.get(LICENSE_KEY_ENV) or None
    return settings


def _apply(settings: Settings, values: Mapping[str, Any], source: str) -> None:
    """Overlay non-empty values onto settings."""
    unknown = set(values) - {"version", "edition", "cache", "download_urls"}
    if unknown:
        raise ConfigurationError(
            f"Unknown {source} key(s): {', '.join(sorted(unknown))}"
        )

    version = values.get("version")
    if version not in (None, ""):
        settings.version = str(version).strip()

    edition = values.get("edition")
    if edition not in (None, ""):
        settings.edition = Edition.parse(edition)

    cache = values.get("cache")
    if cache not in (None, ""):
        settings.cache = parse_bool(cache, f"cache ({source})")

    download_urls = values.get("download_urls")
    if download_urls:
        if not isinstance(download_urls, dict):
            raise ConfigurationError(f"download_urls in {source} must be a mapping")
        settings.download_urls.update(download_urls)

    logger.debug(f"Applied settings from {source}")
