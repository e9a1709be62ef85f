"""Tests for the add-video pipeline."""

from unittest.mock import MagicMock

import pytest

from video_catalog.catalog import INVALID_URL_MESSAGE, NO_VIDEO_ID_MESSAGE, add_video
from video_catalog.enrichment import EnrichmentResult, VideoMetadata
from video_catalog.errors import InvalidRequestError, StorageError
from video_catalog.store import InMemoryVideoStore


@pytest.fixture
def store():
    return InMemoryVideoStore()


@pytest.mark.parametrize(
    "url",
    [
        "https://youtu.be/S15e-qC1S0I",
        "https://www.youtube.com/watch?v=S15e-qC1S0I",
        "https://www.youtube.com/embed/S15e-qC1S0I",
    ],
)
def test_add_video_patterns(store, url):
    record = add_video(store, url, "test")
    assert record.video_id == "S15e-qC1S0I"
    assert record.admin_annotation == "test"
    assert store.list_all() == [record]


@pytest.mark.parametrize("url", [None, "", "not a url", 12])
def test_invalid_url_rejected(store, url):
    with pytest.raises(InvalidRequestError) as exc:
        add_video(store, url, "")
    assert exc.value.message == INVALID_URL_MESSAGE
    assert store.list_all() == []


def test_url_without_id_rejected(store):
    with pytest.raises(InvalidRequestError) as exc:
        add_video(store, "https://vimeo.com/123", "")
    assert exc.value.message == NO_VIDEO_ID_MESSAGE
    assert store.list_all() == []


def test_invalid_url_never_fetches(store):
    fetch = MagicMock()
    with pytest.raises(InvalidRequestError):
        add_video(store, "https://youtu.be/", "", api_key="key", fetch=fetch)
    fetch.assert_not_called()


def test_enriched_video(store):
    fetch = MagicMock(return_value=EnrichmentResult(metadata=VideoMetadata("Vrai titre", "Chaîne", 180000)))
    record = add_video(store, "https://youtu.be/Rz1x02nnlqg", "", api_key="key", fetch=fetch)
    assert record.title == "Vrai titre"
    assert record.uploader == "Chaîne • 180K vues"
    assert record.view_count == 180000


def test_enrichment_failure_still_adds(store):
    fetch = MagicMock(return_value=EnrichmentResult.failure("timeout"))
    record = add_video(store, "https://youtu.be/Rz1x02nnlqg", "", api_key="key", fetch=fetch)
    assert record.view_count is None
    assert record.uploader.endswith("N/A vues")
    assert store.list_all() == [record]


def test_missing_annotation_is_empty(store):
    record = add_video(store, "https://youtu.be/Rz1x02nnlqg", None)
    assert record.admin_annotation == ""


def test_storage_error_propagates():
    store = MagicMock()
    store.insert.side_effect = StorageError("db down")
    with pytest.raises(StorageError):
        add_video(store, "https://youtu.be/Rz1x02nnlqg", "")
