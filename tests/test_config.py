from __future__ import annotations

import asyncio
import logging
import os
from pathlib import Path

import pytest

from conservation_dashboard import sample_data
from conservation_dashboard.config import configure_logging, load_settings
from conservation_dashboard.outreach import UpdateMailer
from conservation_dashboard.reports import ReportGenerator

ENV_NAMES = (
    "CONSERVATION_ORG_NAME",
    "CONSERVATION_REPORT_DELAY",
    "CONSERVATION_EMAIL_DELAY",
    "CONSERVATION_EXPORT_DIR",
    "CONSERVATION_LOG_LEVEL",
)


def _clear_env(monkeypatch) -> None:  # type: ignore[no-untyped-def]
    # load_dotenv writes straight into os.environ, so swap in a throwaway copy
    clean = {key: value for key, value in os.environ.items() if key not in ENV_NAMES}
    monkeypatch.setattr(os, "environ", clean)


def test_defaults_without_environment(monkeypatch, tmp_path) -> None:  # type: ignore[no-untyped-def]
    _clear_env(monkeypatch)

    settings = load_settings(tmp_path / "missing.env")

    assert settings.organization_name == "Conservation Organization"
    assert settings.report_delay_seconds == 2.0
    assert settings.email_delay_seconds == 1.5
    assert settings.export_dir == Path(".data/exports")
    assert settings.log_level == "INFO"


def test_env_file_overrides_defaults(monkeypatch, tmp_path) -> None:  # type: ignore[no-untyped-def]
    _clear_env(monkeypatch)
    env_file = tmp_path / ".env"
    env_file.write_text(
        "CONSERVATION_ORG_NAME=Cascade Wildlands\n"
        "CONSERVATION_REPORT_DELAY=0\n"
        "CONSERVATION_EXPORT_DIR=out/reports\n"
        "CONSERVATION_LOG_LEVEL=debug\n",
        encoding="utf-8",
    )

    settings = load_settings(env_file)
    generator = ReportGenerator.from_settings(settings)

    assert settings.organization_name == "Cascade Wildlands"
    assert settings.report_delay_seconds == 0
    assert settings.export_dir == Path("out/reports")
    assert settings.log_level == "DEBUG"
    assert generator.organization_name == "Cascade Wildlands"
    assert generator.delay_seconds == 0


def test_bad_delay_is_rejected(monkeypatch, tmp_path) -> None:  # type: ignore[no-untyped-def]
    _clear_env(monkeypatch)
    monkeypatch.setenv("CONSERVATION_EMAIL_DELAY", "soon")

    with pytest.raises(ValueError):
        load_settings(tmp_path / "missing.env")

    monkeypatch.setenv("CONSERVATION_EMAIL_DELAY", "-1")
    with pytest.raises(ValueError):
        load_settings(tmp_path / "missing.env")


def test_configure_logging_quiets_file_watcher() -> None:
    configure_logging("DEBUG")

    assert logging.getLogger("watchdog").level == logging.WARNING


def test_update_emails_are_simulated(caplog) -> None:  # type: ignore[no-untyped-def]
    mailer = UpdateMailer(delay_seconds=0)
    donor = sample_data.donors()[2]

    with caplog.at_level(logging.INFO):
        message = asyncio.run(mailer.send_update(donor))
        sent = asyncio.run(mailer.send_to_active_volunteers(sample_data.volunteers()))

    assert message == "Update email sent to Sarah & Robert Johnson."
    assert sent == 3
    assert "sarahjohnson@email.com" in caplog.text


def test_update_email_needs_address() -> None:
    mailer = UpdateMailer(delay_seconds=0)

    with pytest.raises(ValueError):
        asyncio.run(mailer.send_update({"name": "No Address"}))

    with pytest.raises(ValueError):
        UpdateMailer(delay_seconds=-1)
