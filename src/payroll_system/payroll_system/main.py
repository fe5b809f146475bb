from __future__ import annotations

import importlib
import logging
from pathlib import Path
from types import ModuleType

from dotenv import load_dotenv

from config import get_settings_module

from .container import Container, build_container
from .database.bootstrap import apply_schema, apply_seed_sql, list_tables

logger = logging.getLogger(__name__)

DATABASE_DIR = Path(__file__).resolve().parents[3] / "database"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def load_settings() -> ModuleType:
    load_dotenv(override=False)
    return importlib.import_module(get_settings_module())


def configure_logging(level: str | int = "INFO") -> None:
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)


def create_container() -> Container:
    settings = load_settings()
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    db_config = getattr(settings, "DB_CONFIG")

    logger.debug(
        "settings=%s db=%s@%s:%s/%s",
        settings.__name__,
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
    )

    if bool(getattr(settings, "AUTO_INIT_DB", False)):
        apply_schema(db_config, schema_path=DATABASE_DIR / "schema.sql")
        logger.info("Schema ready (tables=%d)", len(list_tables(db_config)))
    if bool(getattr(settings, "AUTO_SEED_DB", False)):
        apply_seed_sql(db_config, seed_path=DATABASE_DIR / "seed.sql")
        logger.info("Demo seed ready")

    return build_container(
        db_config=db_config,
        max_installments=getattr(settings, "MAX_INSTALLMENTS", None),
    )
