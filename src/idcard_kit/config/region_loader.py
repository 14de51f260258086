"""YAML loader for administrative region tables.

The bundled table ships with the package; a complete GB/T 2260 table can
be supplied through the ``IDCARD_KIT_REGION_FILE`` environment variable.

Example YAML configuration:

    regions:
      "110000": 北京市
      "110101": 北京市东城区
"""

import os
import re
from pathlib import Path
from typing import Optional

import yaml


REGION_FILE_ENV = "IDCARD_KIT_REGION_FILE"

BUNDLED_REGION_FILE = Path(__file__).resolve().parent.parent / "data" / "regions.yaml"

_REGION_CODE_PATTERN = re.compile(r"^[0-9]{6}$")

VALID_LOG_LEVELS = {"debug", "info", "warning", "error", "critical"}
VALID_LOG_FORMATS = {"json", "text"}


def load_regions_from_yaml(path: Path | str) -> dict[str, str]:
    """Load a region table from a YAML file.

    Args:
        path: Path to the YAML file.

    Returns:
        Mapping of six-digit region code to region name.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ValueError: If the YAML structure is invalid.
        yaml.YAMLError: If the YAML is malformed.
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Region file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML structure: expected dict, got {type(data).__name__}")

    regions_data = data.get("regions", {})

    if not isinstance(regions_data, dict):
        raise ValueError(
            f"Invalid regions structure: expected dict, got {type(regions_data).__name__}"
        )

    regions = {}
    for code, name in regions_data.items():
        # Unquoted codes are parsed as integers by YAML
        code = str(code)
        if not _REGION_CODE_PATTERN.match(code):
            raise ValueError(f"Region code must be 6 digits: {code!r}")
        if not isinstance(name, str) or not name:
            raise ValueError(f"Region {code} has no name")
        regions[code] = name

    return regions


def load_regions_from_yaml_safe(path: Path | str) -> tuple[dict[str, str], Optional[str]]:
    """Load a region table, returning an error message instead of raising.

    Returns:
        Tuple of (regions, error_message). If successful, error_message is None.
        If failed, regions is an empty dict.
    """
    try:
        return load_regions_from_yaml(path), None
    except FileNotFoundError as e:
        return {}, str(e)
    except ValueError as e:
        return {}, f"Configuration error: {e}"
    except yaml.YAMLError as e:
        return {}, f"YAML parsing error: {e}"


def region_file_path() -> Path:
    """Region file selected by the environment, or the bundled one."""
    override = os.getenv(REGION_FILE_ENV)
    if override:
        return Path(override)
    return BUNDLED_REGION_FILE


def validate_environment() -> list[str]:
    """Validate idcard-kit environment variables.

    Returns:
        List of validation error messages (empty if all valid).
    """
    errors = []

    log_level = os.getenv("IDCARD_KIT_LOG_LEVEL", "info").lower()
    if log_level not in VALID_LOG_LEVELS:
        errors.append(f"IDCARD_KIT_LOG_LEVEL must be one of {sorted(VALID_LOG_LEVELS)}, got: {log_level}")

    log_format = os.getenv("IDCARD_KIT_LOG_FORMAT", "json").lower()
    if log_format not in VALID_LOG_FORMATS:
        errors.append(f"IDCARD_KIT_LOG_FORMAT must be one of {sorted(VALID_LOG_FORMATS)}, got: {log_format}")

    override = os.getenv(REGION_FILE_ENV)
    if override and not Path(override).exists():
        errors.append(f"{REGION_FILE_ENV} points to a missing file: {override}")

    return errors
