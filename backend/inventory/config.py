from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str = "sqlite:///inventory.db"
    secret_key: str = "change-me-in-production"
    access_token_expire_minutes: int = 60
    jwt_algorithm: str = "HS256"
    bcrypt_rounds: int = 10
    admin_email: str | None = None
    admin_password: str | None = None
    log_level: str = "INFO"

    class Config:
        env_prefix = "INVENTORY_"


settings = Settings()
