from __future__ import annotations

import yaml
from pathlib import Path
from typing import Any, Dict

# Project root (parent of this file)
BASE_DIR = Path(__file__).resolve().parent


def _load_yaml() -> Dict[str, Any]:
    with open(BASE_DIR / "config.yaml", "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            return {}
        return data


CFG = _load_yaml()

# Projection
PROJECTION_YEARS: int = int(CFG["projection_years"])

# Runtime
LOG_LEVEL: str = str(CFG.get("log_level", "INFO")).upper()
CURRENCY_SYMBOL: str = str(CFG.get("currency_symbol", "$"))

# Default property inputs, keyed like PropertyInputs fields
PROPERTY_DEFAULTS: Dict[str, Any] = dict(CFG["property"])
