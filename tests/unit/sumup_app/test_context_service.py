"""Tests for merchant context persistence."""

from pathlib import Path

import pytest

from sumup_app.api import (
    CliConfig,
    FileContextStore,
    InMemoryContextStore,
    default_config_home,
    resolve_merchant_code,
)
from sumup_common.api import ConfigurationError, ContextError


pytestmark = pytest.mark.unit_app


def test_missing_file_reads_as_empty(tmp_path: Path) -> None:
    store = FileContextStore(tmp_path)

    assert store.get_current_merchant_code() == ""
    assert not store.path.exists()


def test_set_creates_directory_and_round_trips(tmp_path: Path) -> None:
    store = FileContextStore(tmp_path)

    store.set_current_merchant_code("MC1")

    assert store.path == tmp_path / "sumup" / "sumup.json"
    assert FileContextStore(tmp_path).get_current_merchant_code() == "MC1"


def test_empty_code_is_omitted_from_file(tmp_path: Path) -> None:
    store = FileContextStore(tmp_path)
    store.set_current_merchant_code("MC1")

    store.set_current_merchant_code("")

    assert store.path.read_text().strip() == "{}"


def test_corrupt_file_raises_configuration_error(tmp_path: Path) -> None:
    store = FileContextStore(tmp_path)
    store.config_dir.mkdir(parents=True)
    store.path.write_text("{not json")

    with pytest.raises(ConfigurationError, match="parse config file"):
        store.load()


def test_default_config_home_per_platform(tmp_path: Path) -> None:
    assert default_config_home({"XDG_CONFIG_HOME": str(tmp_path)}, "linux") == tmp_path
    assert default_config_home({}, "darwin") == Path.home() / ".config"
    assert default_config_home({"APPDATA": "C:/Roaming"}, "win32") == Path("C:/Roaming")
    assert default_config_home({"USERPROFILE": "C:/Users/me"}, "win32") == Path(
        "C:/Users/me/AppData/Roaming"
    )
    with pytest.raises(ConfigurationError):
        default_config_home({}, "win32")


def test_cli_config_defaults() -> None:
    assert CliConfig().current_merchant_code == ""


def test_resolve_merchant_code_prefers_explicit_value() -> None:
    store = InMemoryContextStore("STORED")

    assert resolve_merchant_code("EXPLICIT", store) == "EXPLICIT"
    assert resolve_merchant_code(None, store) == "STORED"


def test_resolve_merchant_code_requires_some_value() -> None:
    with pytest.raises(ContextError, match="merchant code is required"):
        resolve_merchant_code("", InMemoryContextStore())


def test_resolve_merchant_code_wraps_config_failures(tmp_path: Path) -> None:
    store = FileContextStore(tmp_path)
    store.config_dir.mkdir(parents=True)
    store.path.write_text("[]")

    with pytest.raises(ContextError, match="failed to load merchant context"):
        resolve_merchant_code(None, store)
