import os
import tomllib
from dataclasses import dataclass
from pathlib import Path

CONFIG_DIR_ENV_VAR = "GALIAS_CONFIG_DIR"
DEFAULT_REMOTE = "origin"


@dataclass(frozen=True)
class GaliasConfig:
    """In-memory representation of `config.toml`.

    Example config.toml:
      # Remote used by `push` and `hard-reset` (defaults to "origin")
      remote = "upstream"
    """

    remote: str

    @staticmethod
    def defaults() -> "GaliasConfig":
        return GaliasConfig(remote=DEFAULT_REMOTE)


def default_config_dir() -> Path:
    """Directory holding config.toml, honoring GALIAS_CONFIG_DIR."""
    override = os.environ.get(CONFIG_DIR_ENV_VAR)
    if override:
        return Path(override)
    return Path.home() / ".config" / "galias"


def load_config(config_dir: Path) -> GaliasConfig:
    """Load config.toml from the given directory if present; otherwise return defaults."""
    cfg_path = config_dir / "config.toml"
    if not cfg_path.exists():
        return GaliasConfig.defaults()

    data = tomllib.loads(cfg_path.read_text(encoding="utf-8"))
    remote = data.get("remote")
    if remote is None or not str(remote).strip():
        remote = DEFAULT_REMOTE
    return GaliasConfig(remote=str(remote).strip())
