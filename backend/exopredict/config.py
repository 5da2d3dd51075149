from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, SecretStr

class Settings(BaseSettings):
    upstream_url: str = Field("https://backend-cshm.onrender.com", alias="EP_UPSTREAM_URL")
    api_key: SecretStr = Field(SecretStr(""), alias="EP_API_KEY")
    api_key_header: str = Field("X-API-Key", alias="EP_API_KEY_HEADER")
    timeout_s: float = Field(30.0, gt=0, alias="EP_TIMEOUT_S")
    read_retries: int = Field(0, ge=0, le=1, alias="EP_READ_RETRIES")
    allow_origins: str = Field("*", alias="EP_ALLOW_ORIGINS")
    log_level: str = Field("INFO", alias="EP_LOG_LEVEL")
    host: str = Field("0.0.0.0", alias="EP_HOST")
    port: int = Field(8000, alias="EP_PORT")
    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)

    def origins(self) -> List[str]:
        return [o.strip() for o in self.allow_origins.split(",") if o.strip()]

settings = Settings()
