"""Purge endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from cachepurge.api.dependencies import Purger
from cachepurge.api.schemas import (
    PurgeAllRequest,
    PurgeBatchResponse,
    PurgeCustomRequest,
    PurgeResponse,
    PurgeUrlRequest,
)
from cachepurge.core.models import PurgeResult

router = APIRouter(prefix="/purge", tags=["purge"])


def _convert_result_to_response(result: PurgeResult) -> PurgeResponse:
    """Convert domain PurgeResult to API response."""
    return PurgeResponse(
        key=result.key,
        status=result.status,
        deleted=result.deleted,
        wildcard=result.wildcard,
        error_message=result.error_message,
    )


@router.post(
    "/all",
    response_model=PurgeResponse,
    operation_id="purgeAll",
    summary="Purge the whole cache",
    description="Purge the current site, or every site sharing the key prefix.",
)
async def purge_all(request: PurgeAllRequest, purger: Purger) -> PurgeResponse:
    """Purge the site or network cache."""
    result = await purger.purge_all(is_network_scope=request.network)
    return _convert_result_to_response(result)


@router.post(
    "/url",
    response_model=PurgeResponse,
    operation_id="purgeUrl",
    summary="Purge one URL",
    description="Purge the cached copy of a single page. URL filters apply.",
)
async def purge_url(request: PurgeUrlRequest, purger: Purger) -> PurgeResponse:
    """Purge one URL."""
    result = await purger.purge_url(request.url)
    return _convert_result_to_response(result)


@router.post(
    "/custom",
    response_model=PurgeBatchResponse,
    operation_id="purgeCustom",
    summary="Purge custom URLs",
    description="Purge URL suffixes relative to the site, wildcards allowed.",
)
async def purge_custom(request: PurgeCustomRequest, purger: Purger) -> PurgeBatchResponse:
    """Purge a list of URL suffixes."""
    results = await purger.purge_custom_list(request.urls)
    return PurgeBatchResponse(
        results=[_convert_result_to_response(r) for r in results],
        total_deleted=sum(r.deleted for r in results),
    )
