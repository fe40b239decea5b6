# draw_core/config.py
from __future__ import annotations
import logging
import os
from typing import Optional, Tuple

import yaml
from pydantic import ValidationError

from .models import AppConfig

logger = logging.getLogger(__name__)

SETTINGS_ENV = "CHAMPION_DRAW_SETTINGS"
DEFAULT_SETTINGS_PATH = "assets/settings.yaml"

# ===== App defaults (single source: AppConfig field defaults) =====
DEFAULT_CONFIG = AppConfig().model_dump()

DEFAULT_SETTINGS_YAML = (
    "# Champion Draw settings. Missing keys fall back to built-in defaults.\n"
    + yaml.safe_dump(DEFAULT_CONFIG, sort_keys=False)
)


def settings_path() -> str:
    return os.getenv(SETTINGS_ENV) or DEFAULT_SETTINGS_PATH


def ensure_assets_exist(path: str | None = None):
    path = path or settings_path()
    folder = os.path.dirname(path)
    if folder:
        os.makedirs(folder, exist_ok=True)
    if not os.path.exists(path):
        with open(path, "w", encoding="utf-8") as f:
            f.write(DEFAULT_SETTINGS_YAML)
        logger.info("Wrote default settings to %s", path)


def load_settings(path: str | None = None) -> AppConfig:
    """Read the YAML settings file and overlay it on DEFAULT_CONFIG."""
    path = path or settings_path()
    merged = dict(DEFAULT_CONFIG)
    if os.path.exists(path):
        with open(path, "r", encoding="utf-8") as f:
            obj = yaml.safe_load(f) or {}
        if not isinstance(obj, dict):
            raise ValueError(f"Settings file {path} must contain a mapping.")
        unknown = sorted(set(obj) - set(DEFAULT_CONFIG))
        if unknown:
            logger.warning("Ignoring unknown settings keys: %s", ", ".join(unknown))
        merged.update({k: v for k, v in obj.items() if k in DEFAULT_CONFIG})
    return AppConfig(**merged)


def load_settings_or_default(path: str | None = None) -> Tuple[AppConfig, Optional[str]]:
    """Like load_settings, but a broken settings file yields (defaults, message)."""
    try:
        return load_settings(path), None
    except (yaml.YAMLError, ValidationError, ValueError) as e:
        logger.error("Invalid settings file %s: %s", path or settings_path(), e)
        return AppConfig(), f"Settings file is invalid, using defaults: {e}"


def resolved_catalog_url(config: AppConfig) -> str:
    return config.catalog_url.format(
        version=config.catalog_version, locale=config.catalog_locale
    )


# ===== Visual theme (wrapped in <style>) =====
def ui_css() -> str:
    return """
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600;700&display=swap" rel="stylesheet">
<style>
:root{
  --bg:#090a0f;
  --surface: rgba(44, 62, 80, 0.85);
  --muted: #34495e;
  --line:#62727b;
  --text:#ecf0f1;
  --sub:#b0bec5;
  --accent:#3498db; --draw:#e67e22;
  --radius:8px;
  --shadow:0 4px 8px rgba(0,0,0,.2);
}
html, body { background: linear-gradient(135deg, #1b2735 0%, #090a0f 100%) !important; }
body, .stApp, .block-container {
  font-family: Inter, system-ui, Segoe UI, Roboto, Helvetica, Arial, sans-serif; color: var(--text);
}
.block-container { padding-top: 1rem; max-width: 900px; }

.card{
  background: var(--surface) !important;
  border-radius:var(--radius);
  box-shadow:var(--shadow);
}
.section{padding:18px}
.row{display:flex;gap:12px;flex-wrap:wrap;align-items:center;justify-content:center}
.small{color:var(--sub);font-size:12px}

.chip{
  padding:6px 12px;border:1px solid var(--line);
  border-radius:999px;background:var(--muted);cursor:default;
}
.result{
  width:180px;text-align:center;background:var(--muted);
  border-radius:var(--radius);box-shadow:var(--shadow);padding:12px;
  transition: transform .2s;
}
.result:hover{ transform: scale(1.05); }
.result .player{ color:var(--sub); font-size:14px }
.result .champion{ color:var(--text); font-size:20px; font-weight:600 }
.badge{
  display:inline-block;padding:4px 10px;border-radius:999px;
  border:1px solid var(--line);background:var(--muted);font-size:12px;
}

.stButton > button, .stDownloadButton > button {
  border-radius:8px; padding:8px 12px;
}
.stButton > button[kind="primary"] { background: var(--accent); border-color: var(--accent); color:#fff; }
</style>
"""
