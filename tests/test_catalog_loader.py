import json
import pytest
from hello_addon.schemas.stremio import OPTIONAL_META_FIELDS
from hello_addon.utils.catalog_loader import (
    CatalogDataError,
    CatalogStore,
    get_catalog_store,
    load_catalog_store,
)


def _write(tmp_path, data):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


class TestBundledCatalog:
    """The sample data shipped with the add-on"""

    @pytest.fixture
    def store(self):
        return load_catalog_store()

    def test_catalog_types(self, store):
        assert store.catalog_types() == ["movie", "series"]

    def test_movies_in_storage_order(self, store):
        ids = [item.id for item in store.items("movie")]
        assert ids == ["tt0032138", "tt0017136", "tt0051744", "tt1254207", "tt0031051", "tt0137523"]

    def test_series_videos(self, store):
        series = store.find_item("series", "hrbtt0147753")
        assert series.name == "Captain Z-Ro"
        assert series.imdbRating == 6.9
        assert [v.id for v in series.videos] == ["hrbtt0147753:1:1", "hrbtt0147753:1:2"]

    def test_find_item_misses(self, store):
        assert store.find_item("movie", "tt9999999") is None
        assert store.find_item("movie", None) is None
        assert store.find_item("book", "tt0032138") is None

    def test_optional_fields_follow_presence(self, store):
        movie = store.find_item("movie", "tt0032138")
        assert movie.present_optional_fields() == []
        assert movie.optional_meta() == {}

        series = store.find_item("series", "hrbtt0147753")
        assert series.present_optional_fields() == ["logo", "videos", "description", "releaseInfo", "imdbRating"]
        assert set(series.optional_meta()) <= set(OPTIONAL_META_FIELDS)

    def test_stream_kinds(self, store):
        kinds = [store.streams_for("movie", item.id)[0].kind for item in store.items("movie")]
        assert kinds == ["torrent", "torrent", "torrent", "url", "youtube", "external"]

    def test_streams_for_unknown_id_is_empty(self, store):
        assert store.streams_for("movie", "tt9999999") == ()
        assert store.streams_for("series", None) == ()

    def test_bundled_data_has_no_dangling_ids(self, store):
        assert store.dangling_stream_ids() == []

    def test_store_is_read_only(self, store):
        with pytest.raises(TypeError):
            store.catalog["movie"] = ()
        with pytest.raises(TypeError):
            store.streams["movie"]["tt0032138"] = ()
        with pytest.raises(Exception):
            store.items("movie")[0].name = "Changed"


def test_get_catalog_store_is_loaded_once():
    assert get_catalog_store() is get_catalog_store()


def test_dangling_stream_ids_are_reported_not_rejected(tmp_path):
    path = _write(tmp_path, {
        "catalog": {"movie": [{"id": "tt1", "name": "One"}]},
        "streams": {"movie": {"tt1": [{"url": "http://a"}], "tt2": [{"ytId": "x"}]}},
    })
    store = load_catalog_store(path)

    assert store.dangling_stream_ids() == [("movie", "tt2")]
    assert store.streams_for("movie", "tt2")[0].ytId == "x"


def test_stream_without_source_is_rejected(tmp_path):
    path = _write(tmp_path, {"catalog": {}, "streams": {"movie": {"tt1": [{"title": "Nothing"}]}}})
    with pytest.raises(CatalogDataError):
        load_catalog_store(path)


def test_stream_with_two_sources_is_rejected(tmp_path):
    path = _write(tmp_path, {
        "catalog": {},
        "streams": {"movie": {"tt1": [{"url": "http://a", "ytId": "b"}]}},
    })
    with pytest.raises(CatalogDataError):
        load_catalog_store(path)


def test_file_index_needs_info_hash(tmp_path):
    path = _write(tmp_path, {"catalog": {}, "streams": {"movie": {"tt1": [{"url": "http://a", "fileIdx": 0}]}}})
    with pytest.raises(CatalogDataError):
        load_catalog_store(path)


def test_unknown_item_field_is_rejected(tmp_path):
    path = _write(tmp_path, {"catalog": {"movie": [{"id": "tt1", "name": "One", "rating": 5}]}})
    with pytest.raises(CatalogDataError):
        load_catalog_store(path)


def test_missing_file(tmp_path):
    with pytest.raises(CatalogDataError):
        load_catalog_store(str(tmp_path / "missing.json"))


def test_invalid_json(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(CatalogDataError):
        load_catalog_store(str(path))


def test_catalog_file_from_environment(tmp_path, monkeypatch):
    path = _write(tmp_path, {"catalog": {"series": [{"id": "hrb1", "name": "Env Show"}]}})
    monkeypatch.setenv("ADDON_CATALOG_FILE", path)

    store = load_catalog_store()

    assert store.catalog_types() == ["series"]
    assert store.has_stream_type("series") is False


def test_empty_store():
    store = CatalogStore({}, {})
    assert store.catalog_types() == []
    assert store.has_catalog_type(None) is False
    assert store.dangling_stream_ids() == []
