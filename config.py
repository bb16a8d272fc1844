import os
from dotenv import load_dotenv

load_dotenv()

# Initialize Sentry early, before anything else imports
_sentry_dsn = os.getenv("SENTRY_DSN")
if _sentry_dsn:
    import sentry_sdk
    sentry_sdk.init(
        dsn=_sentry_dsn,
        traces_sample_rate=float(os.getenv("SENTRY_TRACES_SAMPLE_RATE", "0.1")),
        environment=os.getenv("FLASK_ENV", "production"),
    )

class Config:
    # Flask
    FLASK_SECRET_KEY = os.getenv("FLASK_SECRET_KEY", "engcalc-secret-key-change-in-production")
    DEBUG = os.getenv("FLASK_DEBUG", "False").lower() == "true"
    PORT = int(os.getenv("FLASK_PORT", "5001"))

    # Public site root, used for absolute sitemap URLs
    SITE_BASE_URL = os.getenv("SITE_BASE_URL", "http://localhost:5001").rstrip("/")

    # Converter results
    RESULT_DECIMALS = int(os.getenv("RESULT_DECIMALS", "4"))

    # Search: primary collection when the caller doesn't pass one
    SEARCH_DEFAULT_KIND = os.getenv("SEARCH_DEFAULT_KIND", "converter")

    # Observability
    SENTRY_DSN = os.getenv("SENTRY_DSN")
    LOG_FORMAT = os.getenv("LOG_FORMAT", "text")  # "text" or "json"
    LOG_DIR = os.getenv("LOG_DIR", "logs")
