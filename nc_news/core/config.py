import logging
import os
from typing import List, Union, Any, Optional, Dict
from pydantic import PostgresDsn, Field, field_validator, SecretStr
from pydantic_settings import BaseSettings
from google.cloud import secretmanager
from google.api_core.exceptions import NotFound

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

SECRET_IDS = ['DATABASE_URL', 'POSTGRES_SERVER', 'POSTGRES_USER', 'POSTGRES_PASSWORD', 'POSTGRES_DB']


def get_secrets() -> Optional[dict[str, str]]:
    project_id = os.getenv('GOOGLE_CLOUD_PROJECT')
    if not project_id:
        return None

    client = secretmanager.SecretManagerServiceClient()
    secrets = {}
    for secret_id in SECRET_IDS:
        try:
            name = f"projects/{project_id}/secrets/{secret_id}/versions/latest"
            response = client.access_secret_version(request={"name": name})
            secrets[secret_id] = response.payload.data.decode("UTF-8")
        except NotFound:
            logger.warning(f"Secret {secret_id} not found in GCP Secret Manager.")
    return secrets


class Settings(BaseSettings):
    PROJECT_NAME: str = "NC News"
    ENVIRONMENT: str = Field(default="development")
    LOG_LEVEL: str = Field(default="INFO")
    PORT: int = Field(default=8080)

    BACKEND_CORS_ORIGINS: List[str] = [
        "http://localhost",
        "http://localhost:3000",
        "http://localhost:8080",
    ]

    GOOGLE_CLOUD_PROJECT: Optional[str] = None

    POSTGRES_SERVER: str = "localhost"
    POSTGRES_USER: str = "nc_news"
    POSTGRES_PASSWORD: SecretStr = Field(default=SecretStr(""))
    POSTGRES_DB: str = "nc_news"
    POSTGRES_PORT: int = Field(default=5432)
    DATABASE_URL: Optional[str] = None

    @field_validator("DATABASE_URL", mode='before')
    @classmethod
    def assemble_db_connection(cls, v: Optional[str], info: Any) -> Any:
        if isinstance(v, str):
            return v
        password = info.data.get("POSTGRES_PASSWORD")
        if isinstance(password, SecretStr):
            password = password.get_secret_value()
        return str(PostgresDsn.build(
            scheme="postgresql",
            username=info.data.get("POSTGRES_USER"),
            password=password or None,
            host=info.data.get("POSTGRES_SERVER"),
            port=int(info.data.get("POSTGRES_PORT", 5432)),
            path=info.data.get("POSTGRES_DB") or "",
        ))

    @field_validator("BACKEND_CORS_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> Union[List[str], str]:
        if isinstance(v, str):
            try:
                import json
                return json.loads(v)
            except json.JSONDecodeError:
                return [i.strip() for i in v.split(",") if i.strip()]
        return v

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"
        validate_default = True

    @classmethod
    def from_gcp_secrets(cls) -> 'Settings':
        secrets = get_secrets()
        if secrets:
            return cls(**secrets)
        return cls()


def get_settings() -> Settings:
    env = os.getenv("ENVIRONMENT", "development")
    if env == "production":
        return Settings.from_gcp_secrets()
    return Settings()


def redacted(settings: Settings) -> Dict[str, Any]:
    """Settings as a dict with secrets and database credentials masked."""
    values = {}
    for field, value in settings.model_dump().items():
        if isinstance(value, SecretStr) or field == "DATABASE_URL":
            values[field] = "[REDACTED]"
        else:
            values[field] = value
    return values


settings = get_settings()

logger.info("Settings loaded:")
for field, value in redacted(settings).items():
    logger.info(f"{field}: {value}")
