"""Persistence of the active merchant context."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Mapping, Optional

from pydantic import BaseModel, ValidationError

from sumup_app.interfaces import ContextStore
from sumup_common.errors import ConfigurationError, ContextError

logger = logging.getLogger(__name__)

CONFIG_DIR_NAME = "sumup"
CONFIG_FILE_NAME = "sumup.json"
MERCHANT_CODE_ENV = "SUMUP_MERCHANT_CODE"


class CliConfig(BaseModel):
    """On-disk CLI configuration."""

    current_merchant_code: str = ""

    def save(self, filepath: Path) -> None:
        filepath.write_text(self.model_dump_json(indent=2, exclude_defaults=True))

    @classmethod
    def load(cls, filepath: Path) -> "CliConfig":
        return cls.model_validate_json(filepath.read_text())


def default_config_home(
    env: Mapping[str, str] | None = None,
    platform: str | None = None,
) -> Path:
    """Return the platform configuration directory (without the app suffix)."""
    env = os.environ if env is None else env
    platform = sys.platform if platform is None else platform

    if platform.startswith("win"):
        appdata = env.get("APPDATA")
        if appdata:
            return Path(appdata)
        profile = env.get("USERPROFILE")
        if not profile:
            raise ConfigurationError("unable to determine config directory")
        return Path(profile) / "AppData" / "Roaming"

    xdg = env.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg)
    return Path.home() / ".config"


class FileContextStore(ContextStore):
    """Store the merchant context in ``<config home>/sumup/sumup.json``."""

    def __init__(self, config_home: Optional[Path] = None) -> None:
        base = config_home if config_home is not None else default_config_home()
        self.config_dir = base / CONFIG_DIR_NAME
        self.path = self.config_dir / CONFIG_FILE_NAME

    def load(self) -> CliConfig:
        if not self.path.exists():
            return CliConfig()
        try:
            return CliConfig.load(self.path)
        except ValidationError as exc:
            raise ConfigurationError(
                f"parse config file: {self.path}",
                context={"path": self.path},
                cause=exc,
            ) from exc
        except OSError as exc:
            raise ConfigurationError(
                f"read config file: {exc}",
                context={"path": self.path},
                cause=exc,
            ) from exc

    def save(self, config: CliConfig) -> None:
        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)
            config.save(self.path)
        except OSError as exc:
            raise ConfigurationError(
                f"write config file: {exc}",
                context={"path": self.path},
                cause=exc,
            ) from exc
        logger.debug("Saved CLI config to %s", self.path)

    def get_current_merchant_code(self) -> str:
        return self.load().current_merchant_code

    def set_current_merchant_code(self, merchant_code: str) -> None:
        config = self.load()
        config.current_merchant_code = merchant_code
        self.save(config)


class InMemoryContextStore(ContextStore):
    """Process-local store, used by headless runs and tests."""

    def __init__(self, merchant_code: str = "") -> None:
        self.merchant_code = merchant_code

    def get_current_merchant_code(self) -> str:
        return self.merchant_code

    def set_current_merchant_code(self, merchant_code: str) -> None:
        self.merchant_code = merchant_code


def resolve_merchant_code(explicit: Optional[str], store: ContextStore) -> str:
    """Return the explicit merchant code or fall back to the stored context."""
    if explicit:
        return explicit
    try:
        merchant_code = store.get_current_merchant_code()
    except ConfigurationError as exc:
        raise ContextError(f"failed to load merchant context: {exc}", cause=exc) from exc
    if not merchant_code:
        raise ContextError(
            "merchant code is required. Provide --merchant-code flag "
            "or set context with 'sumup context set'"
        )
    return merchant_code
