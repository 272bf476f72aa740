import importlib
import os
from types import ModuleType


def get_settings_module() -> str:
    # APP_ENV selects the settings module, development by default.
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "timekeeping.config.production"

    if env in {"test", "testing"}:
        return "timekeeping.config.testing"

    return "timekeeping.config.development"


def load_settings(module_name: str) -> ModuleType:
    """Import the settings module and re-read its environment variables.

    Settings modules read ``os.getenv`` at import time; reloading keeps a
    second app built in the same process in step with the current env.
    """
    return importlib.reload(importlib.import_module(module_name))
