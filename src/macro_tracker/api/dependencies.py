"""FastAPI dependencies for caller identity."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import Depends, HTTPException, Request, status

if TYPE_CHECKING:
    from macro_tracker.containers import AppContainer


def _get_user_id_header(request: Request) -> str:
    container: AppContainer = request.app.state.container
    return container.settings.user_id_header


async def current_user_id(
    request: Request,
    header_name: str = Depends(_get_user_id_header),
) -> str:
    """Return the user id forwarded by the trusted auth proxy."""
    user_id = request.headers.get(header_name, "").strip()
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized"
        )
    return user_id
