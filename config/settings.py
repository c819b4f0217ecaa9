from functools import lru_cache
from urllib.parse import quote

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="MILN_",
        env_file=".env",
        extra="ignore",
    )

    # Database credentials; DATABASE_URL wins when set (e.g. sqlite:///dev.sqlite3)
    dbuser: str = ""
    dbpassword: str = ""
    dbaddr: str = "127.0.0.1:3306"
    dbname: str = ""
    database_url: str = ""

    # Optional append-only diagnostic log. Errors are always written to it,
    # informational lines only when log_info is enabled.
    log_file: str = ""
    log_info: bool = False

    # Let the ORM create the table on startup (development and tests only)
    generate_schemas: bool = False

    @property
    def db_url(self) -> str:
        if self.database_url:
            return self.database_url
        user = quote(self.dbuser, safe="")
        password = quote(self.dbpassword, safe="")
        return f"mysql+pymysql://{user}:{password}@{self.dbaddr}/{self.dbname}"


@lru_cache
def get_settings() -> Settings:
    return Settings()
