# draw_core/constants.py
from __future__ import annotations

# --- Roster ---
MAX_ROSTER = 5

# Key used for the persisted roster slot
STORAGE_KEY = "teamMembers"

# --- Catalog source (Data Dragon) ---
CATALOG_URL_TEMPLATE = (
    "https://ddragon.leagueoflegends.com/cdn/{version}/data/{locale}/champion.json"
)
CATALOG_VERSION = "13.18.1"
CATALOG_LOCALE = "en_US"

# --- Catalog load states ---
IDLE = "Idle"
LOADING = "Loading"
READY = "Ready"
ERROR = "Error"
