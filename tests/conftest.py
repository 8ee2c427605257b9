import os
from datetime import datetime, timezone

import pytest
from pydantic import SecretStr

from spaces_signer.core.config import BucketConfig, Credentials, SignerConfig


RUN_INTEGRATION = os.getenv("RUN_INTEGRATION") == "1"
BASE_URL = os.getenv("BASE_URL", "http://localhost:8080")

ACCESS_KEY = "DO00EXAMPLEKEY7Q2Z"
SECRET_KEY = "wJalrXUtnFEMI/K7MDENG+bPxRfiCYEXAMPLEKEY"


@pytest.fixture(scope="session")
def base_url() -> str:
    return BASE_URL


@pytest.fixture(scope="session")
def integration_enabled() -> bool:
    return RUN_INTEGRATION


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 10, 19, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def credentials() -> Credentials:
    return Credentials(access_key=ACCESS_KEY, secret_key=SecretStr(SECRET_KEY))


@pytest.fixture
def bucket() -> BucketConfig:
    return BucketConfig(bucket="700days", region="ams3")


@pytest.fixture
def signer_config(credentials: Credentials, bucket: BucketConfig) -> SignerConfig:
    return SignerConfig(credentials=credentials, bucket=bucket)


@pytest.fixture
def unconfigured_config(bucket: BucketConfig) -> SignerConfig:
    return SignerConfig(credentials=Credentials(access_key=ACCESS_KEY), bucket=bucket)
