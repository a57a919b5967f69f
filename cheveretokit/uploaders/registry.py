"""Registry of known public Chevereto mirrors."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import final, overload

from cheveretokit.models.endpoint import Endpoint


@final
class EndpointRegistry(Sequence[Endpoint]):
    """Read-only, ordered collection of upload endpoints."""

    def __init__(self, endpoints: Iterable[Endpoint]) -> None:
        self._endpoints: tuple[Endpoint, ...] = tuple(endpoints)
        for endpoint in self._endpoints:
            if not isinstance(endpoint, Endpoint):
                raise TypeError(f"Expected Endpoint, got {type(endpoint).__name__}")

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, str]]) -> EndpointRegistry:
        """Build a registry from (upload_url, api_key) pairs.

        Raises:
            ValueError: If any URL or key is empty
        """
        return cls(Endpoint(url, key) for url, key in pairs)

    @overload
    def __getitem__(self, index: int) -> Endpoint: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[Endpoint, ...]: ...

    def __getitem__(self, index: int | slice) -> Endpoint | tuple[Endpoint, ...]:
        return self._endpoints[index]

    def __len__(self) -> int:
        return len(self._endpoints)

    def __iter__(self) -> Iterator[Endpoint]:
        return iter(self._endpoints)

    def __repr__(self) -> str:
        return f"EndpointRegistry({len(self._endpoints)} endpoints)"


DEFAULT_REGISTRY = EndpointRegistry.from_pairs(
    [
        ("http://ultraimg.com/api/1/upload", "3374fa58c672fcaad8dab979f7687397"),
        ("http://yukle.at/api/1/upload", "ee24aee90bcd24e39cead57c65044bde"),
        ("http://img.patifile.com/api/1/upload", "8320784a9b044510e8c723fb778fe3b7"),
        ("http://boltimg.com/api/1/upload", "8dfbcb7ab9b5258a90be7cf09e361894"),
        ("http://snapie.net/myapi/1/upload", "aff7bd5bf65b7e30b675a430049894b3"),
        ("http://picgur.org/api/1/upload", "0a65553c54cf72127d11281f96518469"),
        ("https://pixr.co/api/1/upload", "8fff10a8b0d2852c4167db53aa590e94"),
        ("https://sexr.co/api/1/upload", "46b9aa05ec994098c4b6f18b5eed5e36"),
        ("http://lightpics.net/api/1/upload", "7c6238e8f24c19454315d5dc812d4b93"),
        ("http://imgfly.me/api/1/upload", "c6133147592983996b65dda51ba70255"),
        ("http://imgpinas.com/api/1/upload", "7153eeee787ccbb4b01bea44ec0e699e"),
        ("http://imu.gr/api/1/upload", "a8e5fcfb79df9be675a6aa0a1541a89e"),
        ("http://www.upsieutoc.com/api/1/upload", "c692ca0925f8da5990e8c795602bf942"),
        ("http://www.storemypic.com/api/1/upload", "995269492c2a19902715d5cc3ed810fa"),
        ("http://i.tlthings.net/api/1/upload", "a7yk23ty0k13ralyh32p64hx22p7ek49tt"),
    ]
)
