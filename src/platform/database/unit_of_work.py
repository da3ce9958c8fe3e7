"""
Unit of Work Pattern - one database transaction shared by the repositories inside it

Architecture:
- UoW owns the session lifecycle
- UoW owns commit/rollback
- Repositories receive the shared session from the UoW
- Leaving the block without commit() rolls everything back, including on cancellation
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING, AsyncContextManager, Callable, Optional

import anyio
from sqlalchemy.ext.asyncio import AsyncSession


if TYPE_CHECKING:
    from src.service.ticketing.app.interface.i_booking_store import IBookingStore


class AbstractUnitOfWork(abc.ABC):
    """
    Usage:
        async with uow:
            capacity = await uow.booking_store.get_event_capacity(event_id=...)
            ...
            await uow.commit()
    """

    booking_store: IBookingStore

    async def __aenter__(self) -> AbstractUnitOfWork:
        return self

    async def __aexit__(self, *args) -> None:
        await self.rollback()

    async def commit(self) -> None:
        await self._commit()

    @abc.abstractmethod
    async def _commit(self) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    async def rollback(self) -> None:
        raise NotImplementedError


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory
        self.session: Optional[AsyncSession] = None
        self._session_cm: Optional[AsyncContextManager[AsyncSession]] = None

    async def __aenter__(self) -> SqlAlchemyUnitOfWork:
        from src.service.ticketing.driven_adapter.repo.booking_store_impl import (
            BookingStoreImpl,
        )

        self._session_cm = self.session_factory()
        self.session = await self._session_cm.__aenter__()
        self.booking_store = BookingStoreImpl(session=self.session)
        await super().__aenter__()
        return self

    async def __aexit__(self, *args) -> None:
        # A cancelled caller must still release the transaction and the connection
        with anyio.CancelScope(shield=True):
            try:
                await super().__aexit__(*args)
            finally:
                if self._session_cm is not None:
                    await self._session_cm.__aexit__(*args)
                self._session_cm = None
                self.session = None

    async def _commit(self) -> None:
        if self.session is None:
            raise RuntimeError('Unit of work used outside its async with block')
        await self.session.commit()

    async def rollback(self) -> None:
        if self.session is not None:
            await self.session.rollback()
