from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

load_dotenv()


class Settings(BaseSettings):
    # Backend Configuration
    api_base_url: str = Field(default="http://localhost:5001/api")
    http_timeout: Optional[float] = Field(default=None)  # None -> httpx default

    # Application Configuration
    app_env: str = Field(default="dev")

    # Acting user recorded on audit-tracked transitions when the caller omits one
    default_actor: Optional[str] = Field(default=None)

    # Company used for general file uploads when none is given
    default_company_id: str = Field(default="695a077b7406a1a3c8dd3751")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
