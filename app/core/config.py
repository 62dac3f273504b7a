import os
from dotenv import load_dotenv


def as_bool(val: str | None, default: bool = False) -> bool:
    if val is None:
        return default
    v = str(val).strip().lower()
    return v in {"1", "true", "yes", "on"}


class Settings:
    def __init__(self) -> None:
        # Load variables from .env into environment
        load_dotenv()
        self.SITE_NAME: str = os.getenv("SITE_NAME", "Praktijk")
        self.HOST: str = os.getenv("HOST", "0.0.0.0")
        self.PORT: int = int(os.getenv("PORT", "3000"))
        # Single JSON document holding leave periods and popups
        self.DATA_FILE: str = os.getenv("DATA_FILE", "data/site.json")
        # Backoffice identity (one admin account)
        self.ADMIN_USERNAME: str = os.getenv("ADMIN_USERNAME", "admin")
        self.ADMIN_PASSWORD: str = os.getenv("ADMIN_PASSWORD", "")
        self.SESSION_COOKIE_NAME: str = os.getenv("SESSION_COOKIE_NAME", "sid")
        self.SESSION_MAX_AGE_HOURS: int = int(os.getenv("SESSION_MAX_AGE_HOURS", "24"))
        self.COOKIE_SECURE: bool = as_bool(os.getenv("COOKIE_SECURE"), False)
        # Outbound mail for the contact form
        self.SMTP_HOST: str = os.getenv("SMTP_HOST", "smtp.gmail.com")
        self.SMTP_PORT: int = int(os.getenv("SMTP_PORT", "587"))
        self.SMTP_USER: str = os.getenv("SMTP_USER", "")
        self.SMTP_PASSWORD: str = os.getenv("SMTP_PASSWORD", "")
        self.SMTP_TIMEOUT: float = float(os.getenv("SMTP_TIMEOUT", "10"))
        self.SMTP_USE_SSL: bool = as_bool(os.getenv("SMTP_USE_SSL"), False)
        self.SMTP_USE_TLS: bool = as_bool(os.getenv("SMTP_USE_TLS"), True)
        self.FROM_EMAIL: str = os.getenv("FROM_EMAIL", os.getenv("SMTP_USER", "no-reply@example.com"))
        self.FROM_NAME: str = os.getenv("FROM_NAME", "Website contactformulier")
        self.CONTACT_RECIPIENT: str = os.getenv("CONTACT_RECIPIENT", self.FROM_EMAIL)


settings = Settings()
