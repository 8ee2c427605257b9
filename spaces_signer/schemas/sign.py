from pydantic import BaseModel, ConfigDict, Field


class SignRequest(BaseModel):
    key: str
    ttl_sec: int = Field(default=1800, alias="ttlSec")

    model_config = ConfigDict(populate_by_name=True)


class SignedResult(BaseModel):
    url: str
    expires_in: int = Field(serialization_alias="expiresIn")
    expires_at: str = Field(serialization_alias="expiresAt")
    key: str


class HealthResponse(BaseModel):
    alive: bool = True
    bucket: str
    region: str
    access_key_suffix: str = Field(serialization_alias="accessKeySuffix")
