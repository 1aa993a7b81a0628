from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    RENEW_URL: str = "https://foo.bar/ex"
    LOG_LEVEL: str = "INFO"
    class Config:
        env_file = ".env"

settings = Settings()
