from spaces_signer.core.config import Settings


def test_settings_read_environment(monkeypatch) -> None:
    monkeypatch.setenv("SPACES_BUCKET", "media")
    monkeypatch.setenv("SPACES_REGION", "nyc3")
    monkeypatch.setenv("DO_ACCESS_KEY", "DO00ABCD1234")
    monkeypatch.setenv("DO_SECRET_KEY", "top-secret")

    config = Settings(_env_file=None).signer_config()

    assert config.is_configured
    assert config.bucket.endpoint_host == "media.nyc3.digitaloceanspaces.com"
    assert config.credentials.access_key_suffix == "1234"
    assert config.credentials.secret_key.get_secret_value() == "top-secret"
    assert config.key_prefix == "uploads-shd/"


def test_missing_credentials_are_not_configured(monkeypatch) -> None:
    for name in ("SPACES_BUCKET", "SPACES_REGION", "DO_ACCESS_KEY", "DO_SECRET_KEY"):
        monkeypatch.delenv(name, raising=False)

    config = Settings(_env_file=None).signer_config()

    assert config.bucket.bucket == "700days"
    assert config.bucket.region == "ams3"
    assert not config.is_configured


def test_secret_is_masked_in_repr(monkeypatch) -> None:
    monkeypatch.setenv("DO_ACCESS_KEY", "DO00ABCD1234")
    monkeypatch.setenv("DO_SECRET_KEY", "top-secret")

    config = Settings(_env_file=None).signer_config()

    assert "top-secret" not in repr(config)
    assert "top-secret" not in str(config.model_dump())
