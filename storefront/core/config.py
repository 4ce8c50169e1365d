# storefront/core/config.py
from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Centralized application settings loaded from environment.

    Required env vars (.env):
      - SUPABASE_URL
      - SUPABASE_KEY (anon key; every visitor gets its own client with it)

    Optional:
      - PRODUCT_IMAGE_BUCKET / PRODUCT_IMAGE_FOLDER (where admin uploads go)
      - PAYMENT_QR_URL (static image shown on the cart page)
      - SESSION_COOKIE_NAME (cookie that identifies a visitor)
      - SESSION_COOKIE_SECURE (send that cookie over HTTPS only; turn off
        for plain-HTTP local development)
      - MAX_VISITORS (visitor sessions kept in memory before the least
        recently seen is dropped)
      - CORS_ORIGINS (comma separated)
    """

    PROJECT_NAME: str = "VN Furniture Storefront"
    API_V1_STR: str = "/api/v1"

    # Supabase config
    SUPABASE_URL: str
    SUPABASE_KEY: str

    # Storage layout for product images
    PRODUCT_IMAGE_BUCKET: str = "products"
    PRODUCT_IMAGE_FOLDER: str = "product-images"

    PAYMENT_QR_URL: str = (
        "https://raw.githubusercontent.com/yourusername/project-assets/main/qr-code.png"
    )

    SESSION_COOKIE_NAME: str = "storefront_session"
    SESSION_COOKIE_SECURE: bool = True
    MAX_VISITORS: int = Field(default=1000, ge=1)

    CORS_ORIGINS: str = "http://localhost:5173,http://127.0.0.1:5173"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    """
    Cached settings loader.
    Ensures we don't re-parse .env on every import / request.
    """
    return Settings()
