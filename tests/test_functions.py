import json

import pytest

from spaces_signer import functions


@pytest.fixture
def configured(monkeypatch, signer_config):
    monkeypatch.setattr(functions, "get_signer_config", lambda: signer_config)
    return signer_config


@pytest.fixture
def unconfigured(monkeypatch, unconfigured_config):
    monkeypatch.setattr(functions, "get_signer_config", lambda: unconfigured_config)
    return unconfigured_config


def test_post_returns_json_string_body(configured) -> None:
    result = functions.main({"__ow_method": "post", "key": "uploads-shd/video.mp4"})
    assert result["statusCode"] == 200
    assert result["headers"]["Content-Type"] == "application/json"

    body = json.loads(result["body"])
    assert body["url"].startswith("https://700days.ams3.")
    assert "/uploads-shd/video.mp4?" in body["url"]
    assert body["expiresIn"] == 1800
    assert body["key"] == "uploads-shd/video.mp4"


def test_invalid_prefix(configured) -> None:
    result = functions.main({"__ow_method": "post", "key": "secrets/dump.sql"})
    assert result["statusCode"] == 400
    assert json.loads(result["body"]) == {"error": "Invalid key prefix"}


def test_options_body_is_empty_string(configured) -> None:
    result = functions.main({"__ow_method": "options"})
    assert result["statusCode"] == 204
    assert result["body"] == ""
    assert "Content-Type" not in result["headers"]


def test_get_health(configured) -> None:
    result = functions.main({"__ow_method": "get", "key": "anything"})
    assert result["statusCode"] == 200
    assert json.loads(result["body"])["accessKeySuffix"] == "7Q2Z"


def test_missing_method_is_not_allowed(configured) -> None:
    result = functions.main({"key": "uploads-shd/video.mp4"})
    assert result["statusCode"] == 405


def test_misconfigured(unconfigured) -> None:
    result = functions.main({"__ow_method": "options"})
    assert result["statusCode"] == 500
    assert json.loads(result["body"]) == {"error": "Server misconfiguration"}
