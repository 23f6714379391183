"""Unit tests for source IP validation and resolution."""

import pytest
import requests

from azdocker.config import utils as config_utils
from azdocker.config.utils import get_host_ip, is_valid_source_ip, resolve_source_ip


class _Response:
    def __init__(self, text, status=200):
        self.text = text
        self.status_code = status

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")


# ── is_valid_source_ip ───────────────────────────────────────────


@pytest.mark.parametrize(
    "value",
    ["0.0.0.0", "1.2.3.4", "203.0.113.7", "255.255.255.255", "10.0.0.0/8", "192.168.1.0/24", "8.8.8.8/32"],
)
def test_valid_addresses_accepted(value):
    assert is_valid_source_ip(value)


@pytest.mark.parametrize(
    "value",
    [
        "",
        "1.2.3",
        "1.2.3.4.5",
        "a.b.c.d",
        "1.2.x.4",
        "256.1.1.1",
        "1.2.3.4/33",
        "1.2.3.4/",
        "1..3.4",
        "*",
        "::1",
        "1.2.3.4 5",
        "\u0661\u0662.0.0.1",
        "1.2.3.4/\u0663\u0662",
    ],
)
def test_invalid_addresses_rejected(value):
    assert not is_valid_source_ip(value)


# ── get_host_ip ──────────────────────────────────────────────────


def test_get_host_ip_strips_response(monkeypatch):
    monkeypatch.setattr(config_utils.requests, "get", lambda url, timeout: _Response("198.51.100.4\n"))
    assert get_host_ip() == "198.51.100.4"


def test_get_host_ip_wraps_request_errors(monkeypatch):
    def _fail(url, timeout):
        raise requests.ConnectionError("offline")

    monkeypatch.setattr(config_utils.requests, "get", _fail)
    with pytest.raises(RuntimeError, match="Failed to fetch host IP"):
        get_host_ip()


def test_get_host_ip_http_error(monkeypatch):
    monkeypatch.setattr(config_utils.requests, "get", lambda url, timeout: _Response("oops", status=503))
    with pytest.raises(RuntimeError):
        get_host_ip()


# ── resolve_source_ip ────────────────────────────────────────────


def test_explicit_value_returned_without_lookup(monkeypatch, prompter_factory):
    def _no_lookup(url, timeout):
        raise AssertionError("should not query the echo service")

    monkeypatch.setattr(config_utils.requests, "get", _no_lookup)
    assert resolve_source_ip("10.1.0.0/16", prompter_factory()) == "10.1.0.0/16"


def test_explicit_invalid_value_raises(prompter_factory):
    with pytest.raises(ValueError, match="Invalid --source-ip"):
        resolve_source_ip("1.2.3", prompter_factory())


def test_auto_uses_detected_address(monkeypatch, prompter_factory):
    monkeypatch.setattr(config_utils.requests, "get", lambda url, timeout: _Response("198.51.100.4"))
    prompter = prompter_factory()
    assert resolve_source_ip("auto", prompter) == "198.51.100.4"
    assert prompter.questions == []


def test_auto_lookup_failure_falls_back_to_prompt(monkeypatch, prompter_factory):
    def _fail(url, timeout):
        raise requests.Timeout("slow")

    monkeypatch.setattr(config_utils.requests, "get", _fail)
    prompter = prompter_factory(answers=["not an ip", "203.0.113.0/24"])
    assert resolve_source_ip("auto", prompter) == "203.0.113.0/24"
    assert len(prompter.questions) == 2


def test_auto_malformed_response_falls_back_to_prompt(monkeypatch, prompter_factory):
    monkeypatch.setattr(config_utils.requests, "get", lambda url, timeout: _Response("<html>blocked</html>"))
    prompter = prompter_factory(answers=["203.0.113.9"])
    assert resolve_source_ip("AUTO", prompter) == "203.0.113.9"
