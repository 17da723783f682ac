# coinswap/utils/settings.py
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # ---- Networking (used by utils/http.py and the CoinGecko client) ----
    http_timeout: float = Field(default=15, validation_alias="HTTP_TIMEOUT")
    user_agent: str = Field(default="CoinSwap/1.0 (+calculator)", validation_alias="USER_AGENT")

    # ---- Endpoints ----
    coingecko_base: str = Field(
        default="https://api.coingecko.com/api/v3",
        validation_alias="COINGECKO_BASE",
    )
    vs_currency: str = Field(default="usd", validation_alias="VS_CURRENCY")

    # ---- Catalog shape ----
    per_page: int = Field(default=250, gt=0, validation_alias="PER_PAGE")
    catalog_pages: int = Field(default=2, gt=0, validation_alias="CATALOG_PAGES")
    max_coins: int = Field(default=400, gt=0, validation_alias="MAX_COINS")

    # ---- Logs ----
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    # Pydantic v2 settings
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

# Singleton instance imported elsewhere
settings = Settings()
