"""
Application settings, read from CLEANQUOTE_* environment variables or a .env file
"""

from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    company_name: str = "Commercial Cleaning Services"
    pdf_output_dir: str = "pdfs"
    host: str = "0.0.0.0"
    port: int = 5000
    debug: bool = False
    log_level: str = "INFO"
    cors_origins: str = "*"  # comma separated

    model_config = SettingsConfigDict(env_prefix="CLEANQUOTE_", env_file=".env", extra="ignore")

    @property
    def cors_origin_list(self) -> List[str]:
        origins = [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]
        return origins or ["*"]


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance"""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
