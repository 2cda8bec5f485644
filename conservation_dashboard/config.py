"""Runtime settings and logging setup for the conservation dashboard."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv


DEFAULT_ORG_NAME = "Conservation Organization"
DEFAULT_REPORT_DELAY_SECONDS = 2.0
DEFAULT_EMAIL_DELAY_SECONDS = 1.5
DEFAULT_EXPORT_DIR = Path(".data/exports")
DEFAULT_LOG_LEVEL = "INFO"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class Settings:
    organization_name: str = DEFAULT_ORG_NAME
    report_delay_seconds: float = DEFAULT_REPORT_DELAY_SECONDS
    email_delay_seconds: float = DEFAULT_EMAIL_DELAY_SECONDS
    export_dir: Path = DEFAULT_EXPORT_DIR
    log_level: str = DEFAULT_LOG_LEVEL


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number of seconds, got {raw!r}.") from exc
    if value < 0:
        raise ValueError(f"{name} cannot be negative.")
    return value


def load_settings(env_file: str | Path | None = None) -> Settings:
    """Read settings from the environment, after loading a .env file if present."""

    load_dotenv(env_file)
    return Settings(
        organization_name=(os.getenv("CONSERVATION_ORG_NAME") or DEFAULT_ORG_NAME).strip(),
        report_delay_seconds=_env_float("CONSERVATION_REPORT_DELAY", DEFAULT_REPORT_DELAY_SECONDS),
        email_delay_seconds=_env_float("CONSERVATION_EMAIL_DELAY", DEFAULT_EMAIL_DELAY_SECONDS),
        export_dir=Path(os.getenv("CONSERVATION_EXPORT_DIR") or DEFAULT_EXPORT_DIR),
        log_level=(os.getenv("CONSERVATION_LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().upper(),
    )


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler()],
    )
    # Streamlit's file watcher is chatty at DEBUG
    logging.getLogger("watchdog").setLevel(logging.WARNING)
