"""FastAPI dependency helpers.

Hosts install one AuthenticationService per app; route handlers receive it
through Depends(get_authentication_service) instead of a module global.
"""

from typing import Optional

from fastapi import FastAPI, Request

from ..application.services import AuthenticationService

STATE_ATTRIBUTE = "authentication_service"


def install_authentication_service(app: FastAPI, service: Optional[AuthenticationService]) -> None:
    """Store the broker in app state. Passing None detaches it."""
    setattr(app.state, STATE_ATTRIBUTE, service)


def get_authentication_service(request: Request) -> AuthenticationService:
    """Get the broker from app state."""
    service = getattr(request.app.state, STATE_ATTRIBUTE, None)
    if service is None:
        raise RuntimeError(
            "AuthenticationService is not installed; call install_authentication_service(app, service) at startup"
        )
    return service
