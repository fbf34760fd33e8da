import os


def get_settings_module() -> str:
    """Dotted path of the settings module for APP_ENV (default 'development').

    APP_ENV usually comes from .env, which create_app() loads before calling
    this. Each module reads LOG_LEVEL, SEED_PATH, EXPORT_DIR and
    PASSWORD_HASH_METHOD from the environment.
    """
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "config.production"

    if env in {"test", "testing"}:
        return "config.testing"

    return "config.development"
