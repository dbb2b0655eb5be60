"""Responses emitted by a streaming read of cached data."""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar, Union

T = TypeVar("T")


class ResponseOrigin(Enum):
    """Where the data of a response came from."""

    CACHE = "cache"
    FETCHER = "fetcher"


class StoreResponse:
    """Closed family of responses for a streaming read."""

    @dataclass(frozen=True)
    class Loading:
        """A refresh from the network has started."""

        origin: ResponseOrigin = ResponseOrigin.FETCHER

    @dataclass(frozen=True)
    class Data(Generic[T]):
        """A snapshot of the data for the requested key."""

        value: T
        origin: ResponseOrigin

    @dataclass(frozen=True)
    class NoNewData:
        """The refresh completed without changing the stored snapshot."""

        origin: ResponseOrigin = ResponseOrigin.FETCHER

    @dataclass(frozen=True)
    class Error:
        """The refresh failed."""

        message: str | None
        origin: ResponseOrigin = ResponseOrigin.FETCHER


# A response for a streaming read of data of type T.
AnyStoreResponse = Union[
    StoreResponse.Loading,
    StoreResponse.Data[T],
    StoreResponse.NoNewData,
    StoreResponse.Error,
]
