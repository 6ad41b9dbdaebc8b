"""Config utility for persistent AssetGnome settings (library root, database).

Reads and writes ~/.config/assetgnome/config.toml (respecting XDG_CONFIG_HOME).
Uses tomli/tomli-w for TOML parsing and writing.
"""

import os
from pathlib import Path
from typing import Any, TypeVar, cast

import tomli
import tomli_w

# Determine config directory respecting XDG_CONFIG_HOME if set.
_xdg_config_home = Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))
CONFIG_DIR = _xdg_config_home / "assetgnome"
CONFIG_FILE = CONFIG_DIR / "config.toml"

DEFAULT_LIBRARY_ROOT = Path.home() / ".local" / "share" / "assetgnome" / "library"
DATABASE_FILENAME = "assetgnome.db"

T = TypeVar("T")


def _read_config_file() -> dict[str, Any]:
    """Read the TOML config file if it exists, returning a (nested) dict."""
    if not CONFIG_FILE.exists():
        return {}
    with CONFIG_FILE.open("rb") as f:
        return tomli.load(f)


def _lookup_nested(data: dict[str, Any], dotted_key: str) -> Any | None:
    """Retrieve a nested value from *data* given a dotted key path.

    Example: dotted_key="library.root" will attempt ``data["library"]["root"]``
    returning None if any level is missing.
    """
    current: Any = data
    for part in dotted_key.split("."):
        if not isinstance(current, dict):
            return None
        current = current.get(part)
        if current is None:
            return None
    return current


def _make_env_var_name(dotted_key: str, prefix: str = "ASSETGNOME_") -> str:
    """Convert a dotted key path to an uppercase ENV var name.

    Example: "library.root" -> "ASSETGNOME_LIBRARY_ROOT".
    """
    return prefix + dotted_key.replace(".", "_").upper()


def _coerce(raw: Any, default: T) -> T:
    """Convert *raw* to a Path when *default* is one; pass other values through."""
    if isinstance(default, Path):
        return cast(T, Path(raw).expanduser())
    return cast(T, raw)


def resolve_setting(
    key: str,
    *,
    default: T,
    cli_value: T | None = None,
) -> T:
    """Resolve a configuration *key* using precedence CLI > env > config > default.

    Args:
        key: Dotted key path, e.g. ``"library.root"``.
        default: Value to fall back to when no overrides found.
        cli_value: Value passed from CLI option (may be ``None`` when not provided).

    Returns:
        The resolved value with type matching *default* (or *cli_value*).
    """
    if cli_value is not None:
        return cli_value

    env_var = _make_env_var_name(key)
    if env_var in os.environ:
        return _coerce(os.environ[env_var], default)

    file_val = _lookup_nested(_read_config_file(), key)
    if file_val is not None:
        return _coerce(file_val, default)

    return default


def set_setting(key: str, value: str) -> None:
    """Persist *value* under the dotted *key* in config.toml.

    Args:
        key: Dotted key path, e.g. ``"library.root"``.
        value: The value to store.
    """
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    data = _read_config_file()
    *parents, leaf = key.split(".")
    node = data
    for part in parents:
        child = node.get(part)
        if not isinstance(child, dict):
            child = {}
            node[part] = child
        node = child
    node[leaf] = value
    with CONFIG_FILE.open("wb") as f:
        tomli_w.dump(data, f)


def get_library_root(cli_value: Path | None = None) -> Path:
    """Return the directory holding the local library."""
    return resolve_setting("library.root", default=DEFAULT_LIBRARY_ROOT, cli_value=cli_value)


def get_database_path(
    cli_value: Path | None = None, library_root: Path | None = None
) -> Path:
    """Return the SQLite database used for actions and item metadata.

    Defaults to a file inside the library root.
    """
    root = library_root if library_root is not None else get_library_root()
    return resolve_setting(
        "library.database", default=root / DATABASE_FILENAME, cli_value=cli_value
    )
