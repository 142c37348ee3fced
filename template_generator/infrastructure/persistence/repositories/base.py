"""Base repository: generic create/update plus SQLAlchemy error translation."""

import logging
from collections.abc import Awaitable, Callable
from functools import wraps
from typing import Generic, ParamSpec, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from template_generator.domain.exceptions import UpstreamException
from template_generator.infrastructure.persistence.database import Base

logger = logging.getLogger(__name__)

P = ParamSpec("P")
R = TypeVar("R")
ModelType = TypeVar("ModelType", bound=Base)


def translate_db_errors(
    message: str,
) -> Callable[[Callable[P, Awaitable[R]]], Callable[P, Awaitable[R]]]:
    """Re-raise SQLAlchemy failures from the wrapped coroutine as UpstreamException(message)."""

    def decorator(func: Callable[P, Awaitable[R]]) -> Callable[P, Awaitable[R]]:
        @wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            try:
                return await func(*args, **kwargs)
            except SQLAlchemyError as e:
                logger.error("%s: %s", message, e)
                raise UpstreamException(message, reason=str(e)) from e

        return wrapper

    return decorator


class BaseRepository(Generic[ModelType]):
    """Base repository with create, create_all and update.

    No delete: templates and components are soft-deleted through update.
    """

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    async def create(self, obj: ModelType) -> ModelType:
        """Persist a new record; server defaults are loaded back."""
        self.db.add(obj)
        await self.db.flush()
        await self.db.refresh(obj)
        return obj

    async def create_all(self, objs: list[ModelType]) -> list[ModelType]:
        """Persist several records in one flush."""
        self.db.add_all(objs)
        await self.db.flush()
        for obj in objs:
            await self.db.refresh(obj)
        return objs

    async def update(self, obj: ModelType) -> ModelType:
        """Flush changes on an attached record and reload it."""
        await self.db.flush()
        await self.db.refresh(obj)
        return obj
