from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    DATABASE_URL: str
    APP_NAME: str = "Splitledger Backend"
    LOG_LEVEL: str = "INFO"
    DB_CONNECT_RETRIES: int = 5
    DB_CONNECT_DELAY: float = 2.0

    class Config:
        env_file = ".env"

settings = Settings()
