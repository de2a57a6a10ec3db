import pytest

from spotkit.errors import EmptyResponseError, MetadataError
from spotkit.request import first_payload, metadata_uri


def test_uri_without_query():
    assert metadata_uri("hm://metadata/track", "SE") == "hm://metadata/track?country=SE"


def test_uri_with_query():
    assert metadata_uri("hm://x?a=1", "DK") == "hm://x?a=1&country=DK"


def test_uri_with_product():
    assert metadata_uri("hm://x", "NO", "premium") == "hm://x?country=NO&product=premium"


def test_uri_has_single_question_mark():
    result = metadata_uri("hm://x?a=1&b=2", "FI", "free")
    assert result.count("?") == 1
    assert result.endswith("&product=free")


def test_first_payload_picks_first():
    assert first_payload([b"first", b"second"]) == b"first"


def test_first_payload_empty():
    with pytest.raises(EmptyResponseError):
        first_payload([])


def test_empty_payload_is_metadata_error():
    with pytest.raises(MetadataError, match="empty response"):
        first_payload(())