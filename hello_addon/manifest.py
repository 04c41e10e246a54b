from hello_addon.schemas.stremio import Manifest

MANIFEST = Manifest.model_validate({
    "id": "org.stremio.helloruby",
    "version": "1.0.0",
    "name": "Hello Ruby Add-on",
    "description": "Sample addon made with Rack providing a few public domain movies",
    "types": [
        "movie",
        "series"
    ],
    "catalogs": [
        {"type": "movie", "id": "Hello, Ruby"},
        {"type": "series", "id": "Hello, Ruby"}
    ],
    "resources": [
        "catalog",
        # meta is only requested for series whose id starts with hrb
        {"name": "meta", "types": ["series"], "idPrefixes": ["hrb"]},
        {"name": "stream", "types": ["movie", "series"], "idPrefixes": ["tt", "hrb"]}
    ]
})


def get_manifest():
    return MANIFEST.model_dump(mode="json", exclude_none=True)
