from pydantic import BaseModel, ConfigDict, model_validator
from typing import Optional, List, Dict, Any, Tuple, Union

# Descriptive fields copied into a meta response when the item carries them
OPTIONAL_META_FIELDS: Tuple[str, ...] = (
    "posterShape",
    "background",
    "logo",
    "videos",
    "description",
    "releaseInfo",
    "imdbRating",
    "director",
    "cast",
    "dvdRelease",
    "released",
    "inTheaters",
    "certification",
    "runtime",
    "language",
    "country",
    "awards",
    "website",
    "isPeered",
)

# Stream source fields, exactly one of which is set on every stream
STREAM_SOURCES: Dict[str, str] = {
    "infoHash": "torrent",
    "url": "url",
    "ytId": "youtube",
    "externalUrl": "external",
}


class ResourceDeclaration(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    types: Optional[Tuple[str, ...]] = None
    idPrefixes: Optional[Tuple[str, ...]] = None


class CatalogDeclaration(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: str
    id: str
    name: Optional[str] = None


class Manifest(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    version: str
    name: str
    description: str
    types: Tuple[str, ...]
    catalogs: Tuple[CatalogDeclaration, ...]
    resources: Tuple[Union[str, ResourceDeclaration], ...]


class Video(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    season: Optional[int] = None
    episode: Optional[int] = None
    released: Optional[str] = None
    thumbnail: Optional[str] = None
    overview: Optional[str] = None


class CatalogItem(BaseModel):
    """
    One movie or series.

    Optional fields are tracked by presence: only the ones given in the
    source record end up in ``model_fields_set`` and get serialized.
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str
    name: str
    genres: Optional[Tuple[str, ...]] = None

    posterShape: Optional[str] = None
    background: Optional[str] = None
    logo: Optional[str] = None
    videos: Optional[Tuple[Video, ...]] = None
    description: Optional[str] = None
    releaseInfo: Optional[str] = None
    imdbRating: Optional[float] = None
    director: Optional[Tuple[str, ...]] = None
    cast: Optional[Tuple[str, ...]] = None
    dvdRelease: Optional[str] = None
    released: Optional[str] = None
    inTheaters: Optional[bool] = None
    certification: Optional[str] = None
    runtime: Optional[str] = None
    language: Optional[str] = None
    country: Optional[str] = None
    awards: Optional[str] = None
    website: Optional[str] = None
    isPeered: Optional[bool] = None

    def present_optional_fields(self) -> List[str]:
        """Whitelisted optional fields present on this item, in whitelist order."""
        return [name for name in OPTIONAL_META_FIELDS if name in self.model_fields_set]

    def optional_meta(self) -> Dict[str, Any]:
        present = self.present_optional_fields()
        if not present:
            return {}
        dumped = self.model_dump(mode="json", include=set(present), exclude_unset=True)
        return {name: dumped[name] for name in present}


class Stream(BaseModel):
    """A playable source: torrent, direct url, YouTube id or external link."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    title: Optional[str] = None
    infoHash: Optional[str] = None
    fileIdx: Optional[int] = None
    url: Optional[str] = None
    ytId: Optional[str] = None
    externalUrl: Optional[str] = None

    @model_validator(mode="after")
    def _check_single_source(self):
        sources = [field for field in STREAM_SOURCES if getattr(self, field) is not None]
        if len(sources) != 1:
            raise ValueError(
                f"stream needs exactly one of {', '.join(STREAM_SOURCES)}; got {sources or 'none'}"
            )
        if self.fileIdx is not None and self.infoHash is None:
            raise ValueError("fileIdx is only valid on torrent streams")
        return self

    @property
    def kind(self) -> str:
        for field, kind in STREAM_SOURCES.items():
            if getattr(self, field) is not None:
                return kind
        raise AssertionError("stream without a source")


class MetaPreview(BaseModel):
    id: str
    type: str
    name: str
    genres: Optional[List[str]]
    poster: str


class CatalogResponse(BaseModel):
    metas: List[MetaPreview]


class MetaResponse(BaseModel):
    meta: Optional[Dict[str, Any]] = None


class StreamResponse(BaseModel):
    streams: List[Stream]
