import logging
from typing import Optional

from fastapi.responses import JSONResponse

from hello_addon.routers.catalog import build_meta_preview
from hello_addon.schemas.stremio import MetaResponse
from hello_addon.utils.catalog_loader import CatalogStore
from hello_addon.utils.request_parser import parse_request
from hello_addon.utils.responses import addon_response

logger = logging.getLogger(__name__)


def handle_meta(path_info: str, store: CatalogStore) -> Optional[JSONResponse]:
    """
    Detailed record for one item.

    An unknown id is still a 200 with {"meta": null}; only an unknown type
    is passed on down the chain.
    """
    args = parse_request(path_info)
    content_type = args["type"]
    if not store.has_catalog_type(content_type):
        return None

    logger.info(f"🔍 META REQUEST: type={content_type}, id={args['id']}")
    item = store.find_item(content_type, args["id"])
    if item is None:
        logger.warning(f"⚠️ No {content_type} with id={args['id']}")
        return addon_response(MetaResponse(meta=None).model_dump(mode="json"))

    meta = build_meta_preview(item, content_type).model_dump(mode="json")
    meta.update(item.optional_meta())

    return addon_response(MetaResponse(meta=meta).model_dump(mode="json"))
