from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_env: str = "dev"
    root_path: str = ""
    log_level: str = "INFO"
    cors_origins: list[str] = ["*"]

    db_backend: str = "sqlite"  # sqlite | postgres
    sqlite_path: str = "data.db"

    postgres_db: str = "decision_retro"
    postgres_user: str = "retro_user"
    postgres_password: str = "retro_pass"
    postgres_host: str = "db"
    postgres_port: int = 5432

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def database_url(self) -> str:
        if self.db_backend == "postgres":
            return (
                f"postgresql+psycopg2://{self.postgres_user}:{self.postgres_password}"
                f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
            )
        return f"sqlite:///{self.sqlite_path}"


settings = Settings()
