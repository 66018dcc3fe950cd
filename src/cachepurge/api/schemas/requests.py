"""Request schemas for API endpoints."""

from __future__ import annotations

from typing import Annotated

from pydantic import Field

from cachepurge.api.schemas.base import APIBaseSchema


class PurgeAllRequest(APIBaseSchema):
    """Request to purge a whole site or every site."""

    network: Annotated[
        bool,
        Field(
            default=False,
            description="Purge every key under the prefix instead of the current site.",
        ),
    ]


class PurgeUrlRequest(APIBaseSchema):
    """Request to purge a single URL."""

    url: Annotated[
        str,
        Field(
            min_length=1,
            max_length=2048,
            description="Absolute URL of the cached page.",
        ),
    ]


class PurgeCustomRequest(APIBaseSchema):
    """Request to purge URL suffixes relative to the site."""

    urls: Annotated[
        list[str] | None,
        Field(
            default=None,
            description="Suffixes such as `/feed/` or `/tag/*`. Configured list when omitted.",
        ),
    ]
