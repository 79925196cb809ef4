"""
Tests for structured logging
"""
import json
import logging

import pytest

from core.config import settings
from core.logging import AuditJsonFormatter, ContextTextFormatter, build_formatter, get_logger

pytestmark = pytest.mark.unit


def _record(context=None):
    record = logging.LogRecord("seo_audit.runner", logging.INFO, __file__, 1, "Audit complete", None, None)
    if context is not None:
        record.context = context
    return record


def test_adapter_attaches_context(caplog):
    """Context from get_logger and with_context lands on the record"""
    logger = get_logger("tests.logging", domain="seo_audit")

    with caplog.at_level(logging.INFO, logger="tests.logging"):
        logger.with_context(project_id="proj_1").info("Audit complete")

    assert caplog.records[-1].context == {"domain": "seo_audit", "project_id": "proj_1"}


def test_with_context_does_not_modify_parent():
    """with_context returns a new adapter"""
    parent = get_logger("tests.logging", domain="seo_audit")
    child = parent.with_context(scope="full")

    assert parent.extra == {"domain": "seo_audit"}
    assert child.extra == {"domain": "seo_audit", "scope": "full"}


def test_text_formatter_appends_context():
    """Text output ends with key=value context pairs"""
    formatter = ContextTextFormatter("%(levelname)s %(message)s")

    assert formatter.format(_record({"project_id": "proj_1", "scope": "full"})) == (
        "INFO Audit complete [project_id=proj_1 scope=full]"
    )
    assert formatter.format(_record()) == "INFO Audit complete"


def test_json_formatter_fields():
    """JSON output carries the message, context and service metadata"""
    output = json.loads(AuditJsonFormatter("%(message)s").format(_record({"project_id": "proj_1"})))

    assert output["message"] == "Audit complete"
    assert output["context"] == {"project_id": "proj_1"}
    assert output["level"] == "INFO"
    assert output["logger"] == "seo_audit.runner"
    assert output["service"] == settings.app_name
    assert output["environment"] == "test"
    assert output["timestamp"].endswith("+00:00")


def test_build_formatter():
    """The configured log format selects the formatter"""
    assert isinstance(build_formatter("json"), AuditJsonFormatter)
    assert isinstance(build_formatter("text"), ContextTextFormatter)
