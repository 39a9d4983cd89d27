"""FastAPI dependency injection providers."""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends, Header, Request

from findingdesk.services.actor import ActorProvider, StaticActorProvider


async def get_db(request: Request) -> AsyncGenerator:
    """Yield a database session from the app's session factory."""
    session_factory = request.app.state.db_session_factory
    async with session_factory() as session:
        yield session


def get_actor_provider(
    x_actor_id: Annotated[str | None, Header()] = None,
    x_actor_email: Annotated[str | None, Header()] = None,
) -> ActorProvider:
    """Actor named by the calling front end; identity is not verified here."""
    return StaticActorProvider(x_actor_id or "anonymous", x_actor_email or None)


# Type aliases for dependency injection
DBSession = Annotated[object, Depends(get_db)]
CurrentActor = Annotated[ActorProvider, Depends(get_actor_provider)]
