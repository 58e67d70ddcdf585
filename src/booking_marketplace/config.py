"""Application configuration."""

import json
import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    admin_token: str
    sendgrid_api_key: str
    sendgrid_base_url: str = "https://api.sendgrid.com/v3"
    sendgrid_template_ids: str | None = None
    email_from: str = "bookings@example.com"
    stripe_webhook_secret: str
    session_cookie_name: str = "__session"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_template_ids(raw: str | None) -> dict[str, str]:
    """Parse the template name to SendGrid template id mapping from env."""
    if raw is None or not raw.strip():
        return {}
    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError:
        return {}
    if not isinstance(parsed, dict):
        return {}
    return {str(name): str(template_id) for name, template_id in parsed.items()}
