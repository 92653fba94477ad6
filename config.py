import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./invoices.db")
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ENVIRONMENT = data.get("ENVIRONMENT", "development")
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))
    ENABLE_SENTRY = data.get("ENABLE_SENTRY", 0)
    DSN_SENTRY = data.get("DSN_SENTRY", "")
    SENTRY_ENVIRONMENT = data.get("SENTRY_ENVIRONMENT", "dev")
    AUTO_CREATE_TABLES = bool(data.get("AUTO_CREATE_TABLES", True))

    # Caller identity is set by the auth gateway; these are used when it is bypassed
    AUTH_DISABLED = bool(data.get("AUTH_DISABLED", False))
    DEV_USER_ID = data.get("DEV_USER_ID", "dev-user")
    DEV_USER_NAME = data.get("DEV_USER_NAME", "Developer")
    DEV_USER_EMAIL = data.get("DEV_USER_EMAIL", "dev@example.com")

    # Invoice pricing and presentation
    TAX_RATE = float(data.get("TAX_RATE", 0.18))  # 18% GST, process-wide
    INVOICE_LOCALE = data.get("INVOICE_LOCALE", "en_IN")
    INVOICE_CURRENCY = data.get("INVOICE_CURRENCY", "INR")
    INVOICE_BRAND_NAME = data.get("INVOICE_BRAND_NAME", "Levitation")
    INVOICE_SHOW_ITEM_NAMES = bool(data.get("INVOICE_SHOW_ITEM_NAMES", False))

    # PDF export
    PDF_RENDER_TIMEOUT_SECONDS = float(data.get("PDF_RENDER_TIMEOUT_SECONDS", 30))
