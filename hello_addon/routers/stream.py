import logging
from typing import Optional

from fastapi.responses import JSONResponse

from hello_addon.schemas.stremio import StreamResponse
from hello_addon.utils.catalog_loader import CatalogStore
from hello_addon.utils.request_parser import parse_request
from hello_addon.utils.responses import addon_response

logger = logging.getLogger(__name__)


def handle_stream(path_info: str, store: CatalogStore) -> Optional[JSONResponse]:
    """Streams listed for a movie id or episode id; the catalog is not consulted."""
    args = parse_request(path_info)
    content_type = args["type"]
    if not store.has_stream_type(content_type):
        return None

    logger.info(f"🔍 STREAM REQUEST: type={content_type}, id={args['id']}")
    streams = store.streams_for(content_type, args["id"])
    if streams:
        logger.info(f"✅ {len(streams)} streams, first is {streams[0].kind}")
    else:
        logger.warning(f"⚠️ No streams for {content_type} id={args['id']}")

    response = StreamResponse(streams=list(streams))
    return addon_response(response.model_dump(mode="json", exclude_unset=True))
