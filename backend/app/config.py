from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Empty connection string -> built-in Commission rates are served.
    SQLSERVER_CONN_STRING: str = ""
    CORS_ORIGINS: list[str] = ["http://localhost:3000"]
    LOG_LEVEL: str = "INFO"
    DB_CONNECT_RETRIES: int = 3
    DB_CONNECT_TIMEOUT: int = 30

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
