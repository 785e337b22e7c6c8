from pydantic_settings import BaseSettings
from typing import List, Optional


class Settings(BaseSettings):
    APP_NAME: str = "Blog Posts API"
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # SQLite file used when DATABASE_URL is not given
    DB_STORAGE: str = "./database.sqlite"
    DATABASE_URL: Optional[str] = None
    SQL_ECHO: bool = False

    # "development" exposes stack traces in error responses
    ENVIRONMENT: str = "production"
    LOG_LEVEL: str = "INFO"

    ALLOWED_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    class Config:
        env_file = ".env"  # Load environment variables from the .env file

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return f"sqlite:///{self.DB_STORAGE}"

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT.strip().lower() == "development"


settings = Settings()
