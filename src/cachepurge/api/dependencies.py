"""FastAPI dependency injection."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, HTTPException, Request

from cachepurge.purger import CachePurger


async def get_purger(request: Request) -> CachePurger:
    """Get the cache purger from app state."""
    purger = getattr(request.app.state, "purger", None)
    if purger is None:
        raise HTTPException(status_code=503, detail="Cache purger is not configured")
    return purger


# Type aliases for cleaner dependency injection
Purger = Annotated[CachePurger, Depends(get_purger)]
