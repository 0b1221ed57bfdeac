import logging

from quillquest.core.logger import get_logger, log_agent_action, log_error


def test_child_logger_name():
    assert get_logger("venice").name == "quillquest.venice"


def test_log_error_includes_context(caplog):
    with caplog.at_level(logging.ERROR, logger="quillquest"):
        log_error("Failed to generate world", RuntimeError("boom"), {"route": "/api/worlds"})

    record = caplog.records[-1]
    assert record.levelno == logging.ERROR
    assert "Failed to generate world: boom | route=/api/worlds" in record.getMessage()
    assert record.exc_info is not None


def test_failed_agent_action_is_a_warning(caplog):
    with caplog.at_level(logging.INFO, logger="quillquest"):
        log_agent_action("creative", "generate_world", "degraded: image: timeout", success=False)

    record = caplog.records[-1]
    assert record.levelno == logging.WARNING
    assert record.name == "quillquest.agent.creative"
