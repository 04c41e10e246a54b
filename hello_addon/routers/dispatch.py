"""
Single entry point for every add-on path.

The handlers form a fixed chain: each one gets exactly one chance to claim
the request (manifest, catalog, meta, stream) and the chain ends in a plain
404 when none of them does.
"""

import logging
from typing import List, Optional, Tuple

from fastapi import APIRouter, Request, Response

from hello_addon.routers.catalog import handle_catalog
from hello_addon.routers.manifest import handle_manifest
from hello_addon.routers.meta import handle_meta
from hello_addon.routers.stream import handle_stream
from hello_addon.schemas.type_defs import Handler
from hello_addon.utils.catalog_loader import CatalogStore, get_catalog_store
from hello_addon.utils.responses import not_found_response

router = APIRouter()
logger = logging.getLogger(__name__)

# (mount, handler) in priority order; "/" is the site root
HANDLER_CHAIN: List[Tuple[str, Handler]] = [
    ("/", handle_manifest),
    ("/manifest.json", handle_manifest),
    ("/catalog", handle_catalog),
    ("/meta", handle_meta),
    ("/stream", handle_stream),
]


def _path_below_mount(path: str, mount: str) -> Optional[str]:
    """Remainder of path under mount, or None when the mount does not apply."""
    if path == mount:
        return ""
    if path.startswith(mount + "/"):
        return path[len(mount):]
    return None


def dispatch(path: str, store: CatalogStore, chain: Optional[List[Tuple[str, Handler]]] = None) -> Response:
    """
    Run a raw (percent-encoded) request path through the handler chain.

    Args:
        path: Request path, e.g. "/stream/series/hrbtt0147753:1:1.json"
        store: Catalog data the handlers read from
        chain: Handler chain to use; defaults to HANDLER_CHAIN

    Returns:
        The first handler response, or the 404 fallback
    """
    for mount, handler in chain if chain is not None else HANDLER_CHAIN:
        path_info = _path_below_mount(path, mount)
        if path_info is None:
            continue
        response = handler(path_info, store)
        if response is not None:
            return response

    logger.warning(f"⚠️ No handler for path: {path}")
    return not_found_response()


def _raw_request_path(request: Request) -> str:
    raw_path = request.scope.get("raw_path")
    if raw_path:
        return raw_path.split(b"?", 1)[0].decode("utf-8", errors="replace")
    return request.url.path


@router.api_route("/{path:path}", methods=["GET", "HEAD", "OPTIONS"])
async def handle_addon_request(path: str, request: Request):
    return dispatch(_raw_request_path(request), get_catalog_store())
