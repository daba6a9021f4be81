import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml

from placeindex.exceptions import ConfigurationError

DEFAULT_CONFIG_PATH = Path("config.yaml")

# If OS ENV is nothing these fall back to the Location Service defaults the tool has always used
def get_data_source():
    return os.getenv("PLACE_INDEX_DATA_SOURCE", "Here")

def get_intended_use():
    return os.getenv("PLACE_INDEX_INTENDED_USE", "SingleUse")

def get_language():
    return os.getenv("PLACE_INDEX_LANGUAGE", "en")

def get_pricing_plan():
    return os.getenv("PLACE_INDEX_PRICING_PLAN", "RequestBasedUsage")


@dataclass(frozen=True)
class Settings:
    profile: str
    region: str
    index_name: Optional[str] = None
    data_source: str = "Here"
    intended_use: str = "SingleUse"
    language: str = "en"
    pricing_plan: str = "RequestBasedUsage"
    json_output: bool = False

    @classmethod
    def load(cls, path=None, index_name: Optional[str] = None, json_output: bool = False) -> "Settings":
        """Read the YAML config file and build the settings for one invocation.

        A non-empty ``index_name`` (from ``--index``) overrides ``IndexName`` in the file.
        """
        raw = read_config_file(Path(path) if path else DEFAULT_CONFIG_PATH)

        profile = raw.get("AwsProfile")
        region = raw.get("AwsRegion")
        if not profile:
            raise ConfigurationError("AwsProfile not set")
        if not region:
            raise ConfigurationError("AwsRegion not set in yaml config file")

        return cls(
            profile=str(profile),
            region=str(region),
            index_name=index_name or raw.get("IndexName") or None,
            data_source=_setting(raw, "DataSource", get_data_source),
            intended_use=_setting(raw, "IntendedUse", get_intended_use),
            language=_setting(raw, "Language", get_language),
            pricing_plan=_setting(raw, "PricingPlan", get_pricing_plan),
            json_output=json_output,
        )


def _setting(raw: dict, key: str, default):
    # YAML 1.1 turns bare words like `no` into booleans; keep what the user wrote
    value = raw.get(key)
    if value is None or value == "":
        return default()
    if isinstance(value, bool):
        return "yes" if value else "no"
    return str(value)


def read_config_file(path: Path) -> dict:
    if not path.is_file():
        raise ConfigurationError(f"unable to load config file: {path}")
    try:
        with path.open("r", encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
        raise ConfigurationError(f"failed to read config file {path}: {e}") from e

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigurationError(f"config file {path} must contain a mapping")
    return raw
