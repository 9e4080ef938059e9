from dotenv import load_dotenv
import os

load_dotenv()


def _env_bool(name, default=False):
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _engine_options():
    options = {
        # Drop dead connections before use and recycle idle ones
        'pool_pre_ping': True,
        'pool_recycle': 300,
    }
    sslmode = os.getenv("DATABASE_SSLMODE")
    if sslmode:
        options['connect_args'] = {
            'sslmode': sslmode,
            'connect_timeout': 10,
        }
    return options


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
    SQLALCHEMY_DATABASE_URI = os.getenv("SQLALCHEMY_DATABASE_URI", "sqlite:///nutrition_tracker.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = _engine_options()

    CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",") if o.strip()]
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    GEMINI_API_KEY = os.getenv("GEMINI_API_KEY")
    GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-flash-latest")
    AI_TEMPERATURE = float(os.getenv("AI_TEMPERATURE", "0.3"))

    # Source link checks done while normalizing AI replies
    URL_PROBE_ENABLED = _env_bool("URL_PROBE_ENABLED", True)
    URL_PROBE_TIMEOUT = float(os.getenv("URL_PROBE_TIMEOUT", "2.0"))
    URL_PROBE_WORKERS = int(os.getenv("URL_PROBE_WORKERS", "8"))


class TestingConfig(Config):
    TESTING = True
    SECRET_KEY = "test-secret"
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    SQLALCHEMY_ENGINE_OPTIONS = {}
    GEMINI_API_KEY = None
    URL_PROBE_ENABLED = False
