# draw_core/catalog.py
"""
Catalog loading: a Data Dragon style document {"data": {id: metadata, ...}}
reduced to its list of ids.
"""
from __future__ import annotations
import json
import logging
from typing import List, Optional

import requests

from .config import resolved_catalog_url
from .errors import NetworkError
from .models import AppConfig

logger = logging.getLogger(__name__)


def parse_catalog_document(doc) -> List[str]:
    """Return the keys of doc["data"]; anything else is a malformed document."""
    if not isinstance(doc, dict):
        raise NetworkError("Champion list is malformed (expected an object).")
    data = doc.get("data")
    if not isinstance(data, dict):
        raise NetworkError("Champion list is malformed (missing 'data' mapping).")
    return [str(k) for k in data.keys()]


class HttpCatalogLoader:
    def __init__(self, url: str, timeout: float = 10.0,
                 session: Optional[requests.Session] = None):
        self.url = url
        self.timeout = timeout
        self.session = session

    def load(self) -> List[str]:
        getter = self.session or requests
        try:
            response = getter.get(self.url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.error("Catalog request to %s failed: %s", self.url, e)
            raise NetworkError() from e
        try:
            doc = response.json()
        except ValueError as e:
            logger.error("Catalog response from %s is not JSON: %s", self.url, e)
            raise NetworkError("Champion list is malformed (invalid JSON).") from e
        entries = parse_catalog_document(doc)
        logger.info("Loaded %d catalog entries from %s", len(entries), self.url)
        return entries


class FileCatalogLoader:
    def __init__(self, path: str):
        self.path = path

    def load(self) -> List[str]:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                doc = json.load(f)
        except (OSError, ValueError) as e:
            logger.error("Could not read catalog file %s: %s", self.path, e)
            raise NetworkError() from e
        entries = parse_catalog_document(doc)
        logger.info("Loaded %d catalog entries from %s", len(entries), self.path)
        return entries


def loader_from_config(config: AppConfig, session: Optional[requests.Session] = None):
    if config.catalog_path:
        return FileCatalogLoader(config.catalog_path)
    return HttpCatalogLoader(
        resolved_catalog_url(config), timeout=config.request_timeout, session=session
    )
