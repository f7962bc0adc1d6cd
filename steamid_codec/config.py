from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv

from .enums import Universe

DEFAULT_CFG = Path(__file__).parent / "config_default.yaml"
OUTPUTS = ("table", "json")

ENV_KEYS = {
    "STEAMID_DEFAULT_UNIVERSE": "default_universe",
    "STEAMID_ZERO_UNIVERSE": "zero_universe",
    "STEAMID_OUTPUT": "output",
}

_TRUE = {"1", "y", "yes", "true", "on"}
_FALSE = {"0", "n", "no", "false", "off"}


def parse_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    s = str(value).strip().lower()
    if s in _TRUE:
        return True
    if s in _FALSE:
        return False
    raise ValueError(f"expected a yes/no value, got {value!r}")


def _read_yaml(path: Path) -> Dict:
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping at the top level")
    return data


def validate(cfg: Dict) -> Dict:
    """Coerce config values to their types; raises ValueError on bad values."""
    out = dict(cfg)
    out["default_universe"] = int(Universe.from_int(int(out["default_universe"])))
    out["zero_universe"] = parse_bool(out["zero_universe"])
    out["show_validity"] = parse_bool(out["show_validity"])
    output = str(out["output"]).strip().lower()
    if output not in OUTPUTS:
        raise ValueError(f"output must be one of {', '.join(OUTPUTS)}, got {output!r}")
    out["output"] = output
    return out


def load_config(path: Optional[Path] = None, env_file: Optional[Path] = None) -> Dict:
    """Defaults, then the user YAML file, then environment overrides."""
    cfg = _read_yaml(DEFAULT_CFG)
    if path is not None:
        cfg.update(_read_yaml(Path(path)))

    load_dotenv(dotenv_path=env_file)
    for env_key, cfg_key in ENV_KEYS.items():
        value = os.getenv(env_key, "").strip()
        if value:
            cfg[cfg_key] = value
    return validate(cfg)
