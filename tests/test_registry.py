import pytest

from cheveretokit.models.endpoint import Endpoint
from cheveretokit.uploaders.registry import DEFAULT_REGISTRY, EndpointRegistry


def test_default_registry_contents():
    assert len(DEFAULT_REGISTRY) == 15
    assert all(endpoint.upload_url and endpoint.api_key for endpoint in DEFAULT_REGISTRY)
    assert str(DEFAULT_REGISTRY[0]) == "ultraimg.com"
    assert str(DEFAULT_REGISTRY[-1]) == "i.tlthings.net"


def test_registry_preserves_order_and_allows_duplicates():
    pairs = [("http://b.com/api", "k1"), ("http://a.com/api", "k2"), ("http://b.com/api", "k1")]
    registry = EndpointRegistry.from_pairs(pairs)

    assert [(e.upload_url, e.api_key) for e in registry] == pairs
    assert Endpoint("http://a.com/api", "k2") in registry


def test_registry_is_read_only():
    registry = EndpointRegistry.from_pairs([("http://a.com/api", "k")])

    assert not hasattr(registry, "append")
    with pytest.raises(TypeError):
        registry[0] = Endpoint("http://b.com/api", "k")  # type: ignore[index]


def test_registry_rejects_invalid_entries():
    with pytest.raises(ValueError):
        EndpointRegistry.from_pairs([("http://a.com/api", "")])
    with pytest.raises(TypeError):
        EndpointRegistry(["http://a.com/api"])  # type: ignore[list-item]
