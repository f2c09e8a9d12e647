from __future__ import annotations
from typing import Any, Dict
import yaml

def load_config(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f) or {}
    if not isinstance(cfg, dict):
        raise ValueError(f"Config {path!r} must be a mapping, got {type(cfg).__name__}")
    return cfg
