# app/core/settings.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from typing import List, Optional

class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    api_title: str = Field(default="Portfolio Mailer API", alias="API_TITLE")
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=4000, alias="PORT")
    log_level: str = Field(default="info", alias="LOG_LEVEL")

    # Comma-separated; empty means every origin is allowed
    cors_origins: str = Field(default="", alias="CORS_ORIGINS")

    # Applies to every /api/* route, one shared counter per caller address
    rate_limit: str = Field(default="10/minute", alias="RATE_LIMIT")

    # Proxies whose X-Forwarded-For is trusted when resolving the caller address
    forwarded_allow_ips: str = Field(default="127.0.0.1", alias="FORWARDED_ALLOW_IPS")

    # Resend API key; when unset the contact endpoint answers 500
    resend_api_key: Optional[str] = Field(default=None, alias="RESEND_API_KEY")
    resend_from: str = Field(default="onboarding@resend.dev", alias="RESEND_FROM")

    to_email: str = Field(default="you@example.com", alias="TO_EMAIL")
    from_name: str = Field(default="Portfolio Contact Form", alias="FROM_NAME")

    @property
    def cors_origin_list(self) -> List[str]:
        origins = [o.strip() for o in self.cors_origins.split(",") if o.strip()]
        return origins or ["*"]

    def is_allowed_origin(self, origin: str) -> bool:
        allowed = self.cors_origin_list
        return "*" in allowed or origin in allowed

    @property
    def from_header(self) -> str:
        return f"{self.from_name} <{self.resend_from}>"

settings = Settings()
