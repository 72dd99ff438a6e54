"""
pagerbackup/config.py
Decoder settings. Persists to pagerbackup_config.json.
Lets the database name table be corrected for a handset without code changes.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from pagerbackup.databases import DEFAULT_DATABASE_KINDS

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "pagerbackup_config.json"

DEFAULT_CONFIG = {
    "version": 2,
    "line_feed": "\n",
    "database_kinds": {name: kind.value for name, kind in DEFAULT_DATABASE_KINDS.items()},
}


def _config_path(project_root: Optional[Path] = None) -> Path:
    root = project_root or Path.cwd()
    return root / CONFIG_FILENAME


def _defaults() -> Dict[str, Any]:
    config = dict(DEFAULT_CONFIG)
    config["database_kinds"] = dict(DEFAULT_CONFIG["database_kinds"])
    return config


def load_config(project_root: Optional[Path] = None) -> Dict[str, Any]:
    """Load config from pagerbackup_config.json. Returns defaults if missing."""
    path = _config_path(project_root)
    if path.exists():
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
            if not isinstance(data, dict):
                raise ValueError("top level is not an object")
            return {**_defaults(), **data}
        except (json.JSONDecodeError, ValueError, OSError) as e:
            logger.warning(f"Config load failed: {e}")
    return _defaults()


def save_config(config: Dict[str, Any], project_root: Optional[Path] = None) -> Path:
    """Persist config to pagerbackup_config.json."""
    path = _config_path(project_root)
    path.write_text(json.dumps(config, indent=2), encoding="utf-8")
    return path
