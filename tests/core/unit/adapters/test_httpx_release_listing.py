"""Unit tests for HttpxReleaseListing adapter."""

from unittest.mock import Mock

import httpx
import pytest

from electron_installer.adapters.httpx_release_listing import (
    ELECTRON_RELEASES_URL,
    HttpxReleaseListing,
)
from electron_installer.adapters.ports import ReleaseListingPort
from electron_installer.domain.exceptions import TransportError


def _client(payload=None, status_code=200, exc=None) -> Mock:
    client = Mock(spec=httpx.Client)
    if exc is not None:
        client.get.side_effect = exc
        return client

    response = Mock(spec=httpx.Response)
    response.json.return_value = payload
    if status_code >= 400:
        request = httpx.Request("GET", ELECTRON_RELEASES_URL)
        response.raise_for_status.side_effect = httpx.HTTPStatusError(
            f"HTTP {status_code}", request=request, response=httpx.Response(status_code, request=request)
        )
    client.get.return_value = response
    return client


@pytest.mark.tier(1)
@pytest.mark.tra("Adapter.HttpxReleaseListing")
class TestHttpxReleaseListing:
    """Test HttpxReleaseListing.fetch_tags()."""

    def test_satisfies_port(self):
        """Test that the adapter satisfies ReleaseListingPort."""
        assert isinstance(HttpxReleaseListing(), ReleaseListingPort)

    def test_strips_v_prefix(self):
        """Test that tag names are returned without 'v'."""
        client = _client([{"tag_name": "v1.6.2"}, {"tag_name": "v1.4.15"}, {"tag_name": "1.4.14"}])

        assert HttpxReleaseListing(client=client).fetch_tags() == ["1.6.2", "1.4.15", "1.4.14"]
        client.get.assert_called_once()
        assert client.get.call_args.args[0] == ELECTRON_RELEASES_URL

    def test_skips_malformed_entries(self):
        """Test that entries without a tag are ignored."""
        client = _client([{"name": "no tag"}, "junk", {"tag_name": ""}, {"tag_name": "v1.6.2"}])
        assert HttpxReleaseListing(client=client).fetch_tags() == ["1.6.2"]

    def test_http_error(self):
        """Test that a non-2xx answer raises TransportError with the status."""
        with pytest.raises(TransportError) as exc_info:
            HttpxReleaseListing(client=_client(status_code=403)).fetch_tags()
        assert exc_info.value.status_code == 403

    def test_network_error(self):
        """Test that a network failure raises TransportError without status."""
        client = _client(exc=httpx.ConnectError("offline"))
        with pytest.raises(TransportError) as exc_info:
            HttpxReleaseListing(client=client).fetch_tags()
        assert exc_info.value.status_code is None

    def test_non_list_payload(self):
        """Test that a JSON object instead of an array is rejected."""
        with pytest.raises(TransportError, match="JSON array"):
            HttpxReleaseListing(client=_client({"message": "rate limited"})).fetch_tags()

    def test_invalid_json(self):
        """Test that an unparsable body is rejected."""
        client = _client()
        client.get.return_value.json.side_effect = ValueError("Expecting value")
        with pytest.raises(TransportError, match="invalid JSON"):
            HttpxReleaseListing(client=client).fetch_tags()
