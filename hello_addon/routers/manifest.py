import logging
from typing import Optional

from fastapi.responses import JSONResponse

from hello_addon.manifest import get_manifest
from hello_addon.utils.catalog_loader import CatalogStore
from hello_addon.utils.responses import addon_response

logger = logging.getLogger(__name__)


def handle_manifest(path_info: str, store: Optional[CatalogStore] = None) -> Optional[JSONResponse]:
    """Answer only the bare mount path; anything below it is passed on."""
    if path_info:
        return None

    logger.info("✅ Manifest served")
    return addon_response(get_manifest())
