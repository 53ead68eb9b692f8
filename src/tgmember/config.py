from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, replace
from pathlib import Path

# Environment variable overrides
ENV_LOG_RAW_PAYLOADS = "TGMEMBER_LOG_RAW_PAYLOADS"
ENV_REPORT_UNRECOGNIZED = "TGMEMBER_REPORT_UNRECOGNIZED"

CONFIG_TABLE = "decoder"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


class ConfigError(RuntimeError):
    pass


@dataclass(frozen=True, slots=True)
class DecoderConfig:
    log_raw_payloads: bool = True
    report_unrecognized: bool = True


def _read_config(cfg_path: Path) -> dict:
    try:
        raw = cfg_path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(f"Missing decoder config file {cfg_path}.") from None
    except OSError as e:
        raise ConfigError(f"Failed to read decoder config file {cfg_path}: {e}") from e
    try:
        return tomllib.loads(raw)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Malformed TOML in decoder config {cfg_path}: {e}") from None


def _bool_setting(table: dict, key: str, cfg_path: Path, default: bool) -> bool:
    if key not in table:
        return default
    value = table[key]
    if not isinstance(value, bool):
        raise ConfigError(
            f"Invalid `{CONFIG_TABLE}.{key}` in {cfg_path}; expected a boolean."
        )
    return value


def _env_flag(name: str) -> bool | None:
    value = os.environ.get(name)
    if value is None or not value.strip():
        return None
    normalized = value.strip().lower()
    if normalized in _TRUE:
        return True
    if normalized in _FALSE:
        return False
    raise ConfigError(f"Invalid {name} environment variable; expected a boolean.")


def load_decoder_config(path: str | Path | None = None) -> DecoderConfig:
    """Load decoder settings from the ``[decoder]`` table of a TOML file.

    Environment variables take precedence over the file. Without a path only
    the environment is consulted.
    """
    config = DecoderConfig()
    if path:
        cfg_path = Path(path).expanduser()
        table = _read_config(cfg_path).get(CONFIG_TABLE, {})
        if not isinstance(table, dict):
            raise ConfigError(
                f"Invalid `{CONFIG_TABLE}` in {cfg_path}; expected a table."
            )
        config = DecoderConfig(
            log_raw_payloads=_bool_setting(
                table, "log_raw_payloads", cfg_path, config.log_raw_payloads
            ),
            report_unrecognized=_bool_setting(
                table, "report_unrecognized", cfg_path, config.report_unrecognized
            ),
        )

    log_raw = _env_flag(ENV_LOG_RAW_PAYLOADS)
    if log_raw is not None:
        config = replace(config, log_raw_payloads=log_raw)
    report = _env_flag(ENV_REPORT_UNRECOGNIZED)
    if report is not None:
        config = replace(config, report_unrecognized=report)
    return config
