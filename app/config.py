from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Application
    debug: bool = False
    log_level: str = "INFO"
    shop_name: str = "UC SHOP"
    cdn_base_url: str = "https://cdn.poehali.dev/projects/0468a234-6bd7-4757-9a1c-25f1962e8946/files"

    # Database
    database_url: str = "sqlite:///./ucshop.db"
    auto_create_tables: bool = True

    # Visitor storage (per-browser namespace)
    storage_key: str = "uc_purchases"
    visitor_cookie_name: str = "uc_visitor"
    visitor_cookie_max_age: int = 60 * 60 * 24 * 365

    # Purchase flow
    min_player_id_length: int = 6
    default_payment_method: str = "sberbank"
    donationalerts_url: str = "https://www.donationalerts.com/r/ucshop"


@lru_cache
def get_settings() -> Settings:
    return Settings()
