"""Settings loader for Rollcmd."""

from pathlib import Path
from typing import Any

import tomllib
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def _norm_level(v: Any, default: str) -> str:
    if isinstance(v, bool):
        return default if v else "NONE"
    if isinstance(v, str):
        return v.upper()
    return default


def _toml_settings_source() -> dict[str, Any]:
    """Load settings from config.toml with keys mapped to Settings fields.

    This source has LOWER priority than env/.env so those can override TOML.
    Only keys present in the file are returned; field defaults cover the rest.
    """
    cfg_path = Path("config.toml")
    if not cfg_path.exists():
        return {}
    with cfg_path.open("rb") as f:
        t = tomllib.load(f)

    out: dict[str, Any] = {}
    app_cfg = t.get("app", {}) or {}
    if "env" in app_cfg:
        out["env"] = app_cfg["env"]

    rng_cfg = t.get("rng", {}) or {}
    if rng_cfg.get("seed") is not None:
        out["rng_seed"] = rng_cfg["seed"]

    log_cfg = t.get("logging", {}) or {}
    for key in ("enabled", "level", "file_path", "max_bytes", "backup_count"):
        if key in log_cfg:
            out[f"logging_{key}"] = log_cfg[key]
    # Per-handler levels: strings INFO|DEBUG|WARNING|ERROR|CRITICAL|NONE.
    # Booleans map True -> overall level, False -> NONE.
    overall = str(log_cfg.get("level", "WARNING")).upper()
    if "console" in log_cfg:
        out["logging_console"] = _norm_level(log_cfg["console"], overall)
    if "to_file" in log_cfg:
        out["logging_file"] = _norm_level(log_cfg["to_file"], overall)

    return out


class Settings(BaseSettings):
    env: str = Field(default="dev")

    # --- Randomness ---
    # None means OS entropy; an integer makes every run reproducible.
    rng_seed: int | None = Field(default=None, description="Seed for a deterministic RNG.")

    # --- Logging ---
    logging_enabled: bool = True
    logging_level: str = "WARNING"
    logging_console: str = "WARNING"
    logging_file: str = "NONE"
    logging_file_path: str = "logs/rollcmd.jsonl"
    logging_max_bytes: int = 5_000_000
    logging_backup_count: int = 5

    model_config = SettingsConfigDict(
        env_prefix="ROLLCMD_",
        case_sensitive=False,
        env_file=".env",
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        # Precedence (highest to lowest):
        # 1) init_settings (explicit overrides in code/tests)
        # 2) dotenv (.env in cwd)
        # 3) env_settings (OS env)
        # 4) TOML (config.toml in cwd)
        # 5) file_secret_settings
        return (
            init_settings,
            dotenv_settings,
            env_settings,
            _toml_settings_source,
            file_secret_settings,
        )


def load_settings(**overrides: Any) -> Settings:
    return Settings(**overrides)
