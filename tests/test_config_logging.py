"""Configuration loading and structured logging tests."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from models.clothing_item import ClothingItem
from wardrobe_app.config import WardrobeConfig
from wardrobe_app.logging_config import JsonFormatter, correlation_context, log_event, redact_for_log


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ("APP_ENV", "APP_CONFIG_PATH", "WARDROBE_DB_PATH", "MAX_SUGGESTIONS", "RANDOM_SEED", "LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)


def test_config_defaults() -> None:
    config = WardrobeConfig.from_env()
    assert config.max_suggestions == 6
    assert config.random_seed is None
    assert config.wardrobe_db_path == "data/wardrobe.db"


def test_config_reads_yaml_then_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = tmp_path / "test.yaml"
    path.write_text('# test settings\nwardrobe_db_path: "/tmp/test.db"\nmax_suggestions: 4\nrandom_seed: 11\n')
    monkeypatch.setenv("APP_CONFIG_PATH", str(path))
    monkeypatch.setenv("MAX_SUGGESTIONS", "3")

    config = WardrobeConfig.from_env()
    assert config.wardrobe_db_path == "/tmp/test.db"
    assert config.max_suggestions == 3
    assert config.random_seed == 11


def test_config_rejects_non_integer(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MAX_SUGGESTIONS", "many")
    with pytest.raises(ValueError):
        WardrobeConfig.from_env()


@pytest.mark.parametrize("raw", ["7", "10", "-1"])
def test_config_rejects_cap_outside_zero_to_six(monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
    monkeypatch.setenv("MAX_SUGGESTIONS", raw)
    with pytest.raises(ValueError):
        WardrobeConfig.from_env()


def test_config_accepts_a_lower_cap(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MAX_SUGGESTIONS", "0")
    assert WardrobeConfig.from_env().max_suggestions == 0


def test_redaction_scrubs_user_details() -> None:
    payload = {"user_id": "u1", "note": "mail me at a@b.com", "link": "https://x.test", "count": 2}
    scrubbed = redact_for_log(payload)
    assert scrubbed["user_id"] == "[redacted]"
    assert scrubbed["note"] == "mail me at [redacted-email]"
    assert scrubbed["link"] == "[redacted-url]"
    assert scrubbed["count"] == 2


def test_log_event_emits_json_with_correlation_id(caplog: pytest.LogCaptureFixture) -> None:
    logger = logging.getLogger("tests.logging")
    with caplog.at_level(logging.INFO, logger="tests.logging"):
        with correlation_context("corr-1"):
            log_event(logger, logging.INFO, "suggestions_ready", user_id="u1", count=3)

    record = caplog.records[-1]
    payload = json.loads(JsonFormatter().format(record))
    assert payload["event"] == "suggestions_ready"
    assert payload["correlation_id"] == "corr-1"
    assert payload["user_id"] == "[redacted]"
    assert payload["count"] == 3


def test_log_event_renames_fields_that_clash_with_record_attributes(caplog: pytest.LogCaptureFixture) -> None:
    logger = logging.getLogger("tests.logging")
    with caplog.at_level(logging.INFO, logger="tests.logging"):
        log_event(logger, logging.INFO, "item_added", name="Navy blazer", image_url="https://x.test/a.jpg")

    payload = json.loads(JsonFormatter().format(caplog.records[-1]))
    assert payload["name_"] == "Navy blazer"
    assert payload["logger"] == "tests.logging"
    assert payload["image_url"] == "[redacted]"
    assert payload["correlation_id"]


def test_redaction_reduces_wardrobe_objects_to_ids() -> None:
    item = ClothingItem(item_id="tee", name="White tee", category="TOP", color="white")
    assert redact_for_log({"items": (item,), "description": "my favourite"}) == {
        "items": ["tee"],
        "description": "[redacted]",
    }
