from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv

from config import get_settings_module

from .container import Container, build_container
from .store.seed import load_seed

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app() -> Container:
    """Load settings (.env + APP_ENV module), seed the store and wire services."""

    load_dotenv(override=False)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    seed_path = getattr(settings, "SEED_PATH", None)
    seed = load_seed(seed_path) if seed_path else None

    container = build_container(
        seed=seed,
        password_hash_method=getattr(settings, "PASSWORD_HASH_METHOD", None),
    )

    if bool(getattr(settings, "DEBUG", False)):
        logger.debug(
            "settings=%s seed=%s users=%d",
            settings_module,
            seed_path or "<default>",
            len(container.store.users()),
        )

    return container
