import json
import logging

import pytest

from moodtunes.utils.logging import (
    JSONFormatter,
    LogContext,
    REDACTED,
    ROOT_LOGGER_NAME,
    StructuredLogger,
    configure_logging,
    redact_secrets,
)


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    root = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    root.propagate = True


def test_redact_secrets_masks_nested_values():
    config = {
        "spotify": {
            "client_id": "abc",
            "client_secret": "s3cr3t",
            "token_url": "https://accounts.spotify.com/api/token",
        },
        "server": {"port": 5000},
    }
    redacted = redact_secrets(config)
    assert redacted["spotify"]["client_secret"] == REDACTED
    assert redacted["spotify"]["client_id"] == "abc"
    assert redacted["spotify"]["token_url"] == "https://accounts.spotify.com/api/token"
    assert redacted["server"] == {"port": 5000}
    assert config["spotify"]["client_secret"] == "s3cr3t"


def test_json_formatter_includes_context_and_fields():
    record = logging.LogRecord("moodtunes.test", logging.INFO, __file__, 1, "hello", None, None)
    record.context = LogContext(component="Engine", operation="recommend")
    record.extra_fields = {"mood": "happy"}

    entry = json.loads(JSONFormatter().format(record))

    assert entry["message"] == "hello"
    assert entry["level"] == "INFO"
    assert entry["context"]["component"] == "Engine"
    assert entry["mood"] == "happy"
    assert entry["timestamp"].endswith("Z")


def test_module_loggers_share_package_handler(capsys):
    configure_logging("INFO", "json")
    logging.getLogger("moodtunes.spotify.client").info("from a module")

    entry = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
    assert entry["logger"] == "moodtunes.spotify.client"
    assert entry["message"] == "from a module"


def test_operation_context_logs_failure_and_reraises(capsys):
    configure_logging("INFO", "json")
    logger = StructuredLogger("moodtunes.test")

    with pytest.raises(ValueError):
        with logger.operation_context("Engine", "recommend", mood="sad"):
            raise ValueError("boom")

    lines = [json.loads(line) for line in capsys.readouterr().out.strip().splitlines()]
    failure = lines[-1]
    assert failure["operation_status"] == "failed"
    assert failure["error_type"] == "ValueError"
    assert failure["context"]["metadata"] == {"mood": "sad"}


def test_text_format(capsys):
    configure_logging("INFO", "text")
    StructuredLogger("moodtunes.test").info("plain", mood="chill")
    out = capsys.readouterr().out
    assert "plain" in out
    assert "mood=chill" in out
