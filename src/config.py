from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache

class Settings(BaseSettings):
    # App
    APP_NAME: str = "Calculator API"
    DEBUG: bool = False
    
    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8080
    
    # Logging
    LOG_LEVEL: str = "INFO"
    
    # CORS
    CORS_ALLOW_ORIGIN: str = "*"
    CORS_ALLOW_METHODS: str = "POST, OPTIONS"
    CORS_ALLOW_HEADERS: str = "Content-Type"

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

@lru_cache()
def get_settings() -> Settings:
    return Settings()
