from pathlib import Path
import tomllib
from typing import Any, Dict

from .errors import ConfigError
from .models import Config, Station, StationType

DEFAULT_CONFIG_FILE = "config.toml"
MAX_U8 = 255


def load_config(path: Path) -> Config:
    """Read and validate the TOML config file. Raises ConfigError on any problem."""
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")
    try:
        with path.open("rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Failed to parse TOML config file {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Unable to read config file {path}: {e}") from e
    return parse_config(data)


def parse_config(data: Dict[str, Any]) -> Config:
    station_raw = _require(data, "station", dict)
    station = Station(
        line=_require_int(station_raw, "line", low=1, prefix="station."),
        name=_station_type(_require(station_raw, "name", str, prefix="station.")),
    )
    return Config(
        input_dir=Path(_require(data, "input_dir", str)),
        output_dir=Path(_require(data, "output_dir", str)),
        time_limit=_require_int(data, "time_limit", low=0),
        only_copy=_require(data, "only_copy", bool),
        station=station,
    )


def _require(data: Dict[str, Any], key: str, kind: type, prefix: str = "") -> Any:
    if key not in data:
        raise ConfigError(f"Missing required field: {prefix}{key}")
    value = data[key]
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise ConfigError(f"Field {prefix}{key} must be {kind.__name__}, got {type(value).__name__}")
    return value


def _require_int(data: Dict[str, Any], key: str, low: int, prefix: str = "") -> int:
    value = _require(data, key, int, prefix)
    if not low <= value <= MAX_U8:
        raise ConfigError(f"Field {prefix}{key} must be between {low} and {MAX_U8}, got {value}")
    return value


def _station_type(name: str) -> StationType:
    try:
        return StationType(name)
    except ValueError:
        allowed = ", ".join(t.value for t in StationType)
        raise ConfigError(f"Unknown station name {name!r} (expected one of: {allowed})") from None
