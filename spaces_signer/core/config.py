from functools import lru_cache

from pydantic import BaseModel, ConfigDict, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Credentials(BaseModel):
    model_config = ConfigDict(frozen=True)

    access_key: str = ""
    secret_key: SecretStr = SecretStr("")

    @property
    def access_key_suffix(self) -> str:
        return self.access_key[-4:]


class BucketConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    bucket: str = ""
    region: str = ""
    storage_domain: str = "digitaloceanspaces.com"

    @property
    def endpoint_host(self) -> str:
        return f"{self.bucket}.{self.region}.{self.storage_domain}"


class SignerConfig(BaseModel):
    """Immutable process-wide signing configuration handed to the dispatcher."""

    model_config = ConfigDict(frozen=True)

    credentials: Credentials
    bucket: BucketConfig
    key_prefix: str = "uploads-shd/"
    cors_allow_origin: str = "*"

    @property
    def is_configured(self) -> bool:
        return bool(
            self.bucket.bucket
            and self.bucket.region
            and self.credentials.access_key
            and self.credentials.secret_key.get_secret_value()
        )


class Settings(BaseSettings):
    app_name: str = "spaces-signer"
    app_port: int = 8080
    log_level: str = "INFO"

    # Spaces bucket and signing credentials
    spaces_bucket: str = "700days"
    spaces_region: str = "ams3"
    spaces_domain: str = "digitaloceanspaces.com"
    do_access_key: str = ""
    do_secret_key: SecretStr = SecretStr("")

    signer_key_prefix: str = "uploads-shd/"
    cors_allow_origin: str = "*"  # set to the site origin in production

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    def signer_config(self) -> SignerConfig:
        return SignerConfig(
            credentials=Credentials(access_key=self.do_access_key, secret_key=self.do_secret_key),
            bucket=BucketConfig(
                bucket=self.spaces_bucket,
                region=self.spaces_region,
                storage_domain=self.spaces_domain,
            ),
            key_prefix=self.signer_key_prefix,
            cors_allow_origin=self.cors_allow_origin,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


@lru_cache(maxsize=1)
def get_signer_config() -> SignerConfig:
    return get_settings().signer_config()
