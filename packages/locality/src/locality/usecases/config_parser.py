"""Config parser use case for locality settings."""

from typing import Any

import yaml

from locality.domain.exceptions import LocalityConfigError
from locality.domain.settings import LocalitySettings
from locality.settings import parse_bool, parse_timeout

SECTION = "locality"


class ConfigParser:
    """Parses the locality section of a YAML configuration to settings.

    Expected shape::

        locality:
          compare_node_ip: true
          resolution_timeout_seconds: 0.5

    Both keys are optional. A document without a locality section yields
    default settings.
    """

    def parse(self, yaml_str: str) -> LocalitySettings:
        """Parse YAML config to settings.

        Args:
            yaml_str: YAML string containing an optional locality section.

        Returns:
            LocalitySettings domain object

        Raises:
            LocalityConfigError: If YAML is invalid or values are malformed.
        """
        try:
            config = yaml.safe_load(yaml_str)
        except yaml.YAMLError as e:
            raise LocalityConfigError(f"Invalid YAML: {e}") from e

        if config is None:
            return LocalitySettings()

        if not isinstance(config, dict):
            raise LocalityConfigError("Config must be a dictionary")

        section: Any = config.get(SECTION)
        if section is None:
            return LocalitySettings()

        if not isinstance(section, dict):
            raise LocalityConfigError(f"'{SECTION}' section must be a dictionary")

        kwargs: dict[str, Any] = {}
        if "compare_node_ip" in section:
            kwargs["compare_node_ip"] = parse_bool(
                "compare_node_ip", section["compare_node_ip"]
            )
        if "resolution_timeout_seconds" in section:
            kwargs["resolution_timeout_seconds"] = parse_timeout(
                "resolution_timeout_seconds", section["resolution_timeout_seconds"]
            )

        return LocalitySettings(**kwargs)
