"""
Tests for logging utilities.

Feature: branch-protection-report
"""

import io
import logging

from hypothesis import given, settings
from hypothesis import strategies as st

from branch_protection_report.logging import (
    configure_logging,
    get_logger,
    log_http_request,
    log_http_response,
    mask_sensitive_data,
    safe_log_dict,
)

token_strategy = st.text(
    alphabet=st.sampled_from("ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"),
    min_size=36,
    max_size=40,
)


@given(token=token_strategy)
@settings(max_examples=100)
def test_property_no_token_in_masked_output(token: str) -> None:
    """A personal access token never survives masking, bare or in a header."""
    for text in (f"ghp_{token}", f"Authorization: Bearer {token}", f"token {token}"):
        masked = mask_sensitive_data(text)
        assert token not in masked, f"Token leaked in {masked!r}"


def test_safe_log_dict_masks_authorization() -> None:
    headers = {
        "Authorization": "Bearer abc",
        "Accept": "application/vnd.github+json",
        "nested": {"token": "abc"},
    }

    assert safe_log_dict(headers) == {
        "Authorization": "[REDACTED]",
        "Accept": "application/vnd.github+json",
        "nested": {"token": "[REDACTED]"},
    }


def test_get_logger_names() -> None:
    assert get_logger().name == "branch_protection_report"
    assert get_logger("http").name == "branch_protection_report.http"


def test_http_logging_only_at_debug() -> None:
    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    configure_logging(level=logging.INFO, http_level=logging.INFO, handler=handler)

    try:
        log_http_request("GET", "/orgs/acme", headers={"Authorization": "Bearer abc"})
        assert stream.getvalue() == ""

        configure_logging(level=logging.INFO, http_level=logging.DEBUG, handler=handler)
        log_http_request("GET", "/orgs/acme", headers={"Authorization": "Bearer abc"})
        log_http_response(200, "https://api.github.com/orgs/acme", remaining="4999", elapsed_ms=12.5)
    finally:
        get_logger().removeHandler(handler)

    output = stream.getvalue()
    assert "GET /orgs/acme" in output
    assert "Bearer abc" not in output
    assert "Response 200 from https://api.github.com/orgs/acme" in output
    assert "ratelimit_remaining=4999" in output
    assert "elapsed=12.50ms" in output


def test_configure_logging_replaces_its_previous_handler() -> None:
    first_stream, second_stream = io.StringIO(), io.StringIO()
    first = logging.StreamHandler(first_stream)
    second = logging.StreamHandler(second_stream)

    configure_logging(handler=first)
    installed = len(get_logger().handlers)
    configure_logging(handler=second)

    try:
        assert first not in get_logger().handlers
        assert len(get_logger().handlers) == installed

        get_logger().info("Total Repos: 2")
    finally:
        get_logger().removeHandler(second)

    assert first_stream.getvalue() == ""
    assert second_stream.getvalue().count("Total Repos: 2") == 1


def test_configure_logging_twice_with_same_handler() -> None:
    handler = logging.StreamHandler(io.StringIO())

    configure_logging(handler=handler)
    configure_logging(handler=handler)

    try:
        assert get_logger().handlers.count(handler) == 1
    finally:
        get_logger().removeHandler(handler)
