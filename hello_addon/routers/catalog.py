import logging
from typing import Optional

from fastapi.responses import JSONResponse

from hello_addon.schemas.stremio import CatalogItem, CatalogResponse, MetaPreview
from hello_addon.utils.catalog_loader import CatalogStore
from hello_addon.utils.request_parser import parse_request
from hello_addon.utils.responses import addon_response

logger = logging.getLogger(__name__)

METAHUB_URL = "https://images.metahub.space/poster/medium/%s/img"


def build_meta_preview(item: CatalogItem, content_type: str) -> MetaPreview:
    """Catalog entry for an item; the poster comes from metahub by id."""
    return MetaPreview(
        id=item.id,
        type=content_type,
        name=item.name,
        genres=list(item.genres) if item.genres is not None else None,
        poster=METAHUB_URL % item.id,
    )


def handle_catalog(path_info: str, store: CatalogStore) -> Optional[JSONResponse]:
    """List every item of the requested type, in storage order."""
    args = parse_request(path_info)
    content_type = args["type"]
    if not store.has_catalog_type(content_type):
        return None

    logger.info(f"🔍 CATALOG REQUEST: type={content_type}, id={args['id']}")
    metas = [build_meta_preview(item, content_type) for item in store.items(content_type)]
    logger.info(f"📊 Catalog {content_type}: {len(metas)} items")

    return addon_response(CatalogResponse(metas=metas).model_dump(mode="json"))
