from __future__ import annotations
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Dict, List, Optional
import logging, os, sys

import yaml

logger = logging.getLogger(__name__)

CONFIG_NAME = "nekofetch_config.yml"

@dataclass(frozen=True)
class Config:
    show_username: bool = True
    show_hostname: bool = True
    show_os: bool = True
    show_kernel: bool = True
    show_uptime: bool = True
    show_packages: bool = True
    show_shell: bool = True
    show_resolution: bool = True
    show_de: bool = True
    show_wm: bool = True
    show_wm_theme: bool = True
    show_terminal: bool = True
    show_cpu: bool = True
    show_gpu: bool = True
    show_memory: bool = True
    show_storage: bool = True

# toggle name -> default, read from the dataclass once
DEFAULTS: Dict[str, bool] = {f.name: f.default for f in fields(Config)}

class ConfigError(ValueError):
    """A config document that exists but can't be used."""

def _config_home() -> Path:
    if sys.platform == "win32":
        return Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support"
    return Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))

def config_paths() -> List[Path]:
    """Candidate config files, most specific first."""
    paths = []
    env = os.environ.get("NEKOFETCH_CONFIG")
    if env:
        paths.append(Path(env))
    paths.append(_config_home() / "nekofetch" / CONFIG_NAME)
    paths.append(Path(CONFIG_NAME))
    return paths

def parse_config(text: str) -> Config:
    data = yaml.safe_load(text)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"expected a mapping, got {type(data).__name__}")
    values = {}
    for key, default in DEFAULTS.items():
        v = data.get(key, default)
        if not isinstance(v, bool):
            raise ConfigError(f"{key} must be true or false, got {v!r}")
        values[key] = v
    return Config(**values)

def _read(path: Path) -> Optional[Config]:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("config %s not readable: %s", path, e)
        return None
    try:
        return parse_config(text)
    except Exception as e:
        logger.debug("config %s ignored: %s", path, e)
        return None

def load_config() -> Config:
    for p in config_paths():
        cfg = _read(p)
        if cfg is not None:
            logger.debug("using config %s", p)
            return cfg
    logger.debug("no usable config file, showing everything")
    return Config()
