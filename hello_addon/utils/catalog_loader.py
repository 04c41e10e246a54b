"""
Catalog Loader Utility

Loads the sample movies, series and streams from catalog.json once and
exposes them through a read-only CatalogStore.
"""

import json
import logging
import os
from functools import lru_cache
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple

from pydantic import ValidationError

from hello_addon.config.settings import get_catalog_file
from hello_addon.schemas.stremio import CatalogItem, Stream

logger = logging.getLogger(__name__)


class CatalogDataError(RuntimeError):
    """The catalog data file is missing, unreadable or holds invalid records."""


def _get_catalog_file_path() -> str:
    """Get the path to the bundled catalog.json file."""
    package_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    return os.path.join(package_root, 'data', 'catalog.json')


class CatalogStore:
    """
    Immutable view over the catalog and stream tables.

    Items keep their storage order; streams keep their presentation order
    (first listed is the preferred one).
    """

    def __init__(
        self,
        catalog: Mapping[str, Tuple[CatalogItem, ...]],
        streams: Mapping[str, Mapping[str, Tuple[Stream, ...]]],
    ):
        self._catalog = MappingProxyType({t: tuple(items) for t, items in catalog.items()})
        self._streams = MappingProxyType({
            t: MappingProxyType({item_id: tuple(entries) for item_id, entries in by_id.items()})
            for t, by_id in streams.items()
        })

    @property
    def catalog(self) -> Mapping[str, Tuple[CatalogItem, ...]]:
        return self._catalog

    @property
    def streams(self) -> Mapping[str, Mapping[str, Tuple[Stream, ...]]]:
        return self._streams

    def catalog_types(self) -> List[str]:
        return list(self._catalog)

    def has_catalog_type(self, content_type: Optional[str]) -> bool:
        return content_type in self._catalog

    def items(self, content_type: str) -> Tuple[CatalogItem, ...]:
        return self._catalog.get(content_type, ())

    def find_item(self, content_type: str, item_id: Optional[str]) -> Optional[CatalogItem]:
        """First item of the given type whose id equals item_id."""
        if item_id is None:
            return None
        for item in self.items(content_type):
            if item.id == item_id:
                return item
        return None

    def has_stream_type(self, content_type: Optional[str]) -> bool:
        return content_type in self._streams

    def streams_for(self, content_type: str, item_id: Optional[str]) -> Tuple[Stream, ...]:
        return self._streams.get(content_type, {}).get(item_id, ())

    def dangling_stream_ids(self) -> List[Tuple[str, str]]:
        """
        Stream ids that match no movie id or series video id.

        Dangling ids are allowed; this only feeds the startup diagnostics.
        """
        known = set()
        for items in self._catalog.values():
            for item in items:
                known.add(item.id)
                for video in item.videos or ():
                    known.add(video.id)

        return [
            (content_type, item_id)
            for content_type, by_id in self._streams.items()
            for item_id in by_id
            if item_id not in known
        ]


def _parse_catalog(raw: Dict[str, Any]) -> Dict[str, Tuple[CatalogItem, ...]]:
    return {
        content_type: tuple(CatalogItem.model_validate(entry) for entry in entries)
        for content_type, entries in raw.get('catalog', {}).items()
    }


def _parse_streams(raw: Dict[str, Any]) -> Dict[str, Dict[str, Tuple[Stream, ...]]]:
    return {
        content_type: {
            item_id: tuple(Stream.model_validate(entry) for entry in entries)
            for item_id, entries in by_id.items()
        }
        for content_type, by_id in raw.get('streams', {}).items()
    }


def load_catalog_store(path: Optional[str] = None) -> CatalogStore:
    """
    Load and validate a catalog data file.

    Args:
        path: JSON file to read; defaults to ADDON_CATALOG_FILE or the bundled catalog.json

    Returns:
        A read-only CatalogStore

    Raises:
        CatalogDataError: when the file cannot be read, parsed or validated
    """
    file_path = path or get_catalog_file() or _get_catalog_file_path()

    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            raw = json.load(f)
    except FileNotFoundError as e:
        logger.error(f"❌ [CatalogLoader] catalog file not found at {file_path}")
        raise CatalogDataError(f"catalog file not found: {file_path}") from e
    except json.JSONDecodeError as e:
        logger.error(
            f"❌ [CatalogLoader] JSONDecodeError in {file_path} at line {e.lineno}, column {e.colno}: {e.msg}"
        )
        raise CatalogDataError(f"catalog file is not valid JSON: {file_path}") from e

    if not isinstance(raw, dict):
        logger.error(f"❌ [CatalogLoader] expected an object at the top of {file_path}, got {type(raw).__name__}")
        raise CatalogDataError(f"catalog file must hold a JSON object: {file_path}")

    try:
        store = CatalogStore(_parse_catalog(raw), _parse_streams(raw))
    except ValidationError as e:
        logger.error(f"❌ [CatalogLoader] invalid record in {file_path}: {e}")
        raise CatalogDataError(f"catalog file holds an invalid record: {file_path}") from e

    counts = {t: len(store.items(t)) for t in store.catalog_types()}
    logger.info(f"✅ [CatalogLoader] Loaded {counts} items from {file_path}")
    return store


@lru_cache(maxsize=None)
def get_catalog_store() -> CatalogStore:
    """Process-wide store, loaded on first use and never reloaded."""
    return load_catalog_store()
