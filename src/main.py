"""
Production FastAPI Application

REST API plus the daily reminder scheduler running in the lifespan task group.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import anyio
from fastapi import FastAPI

from src.platform.app_factory import create_app
from src.platform.config.core_setting import settings
from src.platform.config.di import container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.database.orm_db_setting import create_db_and_tables, dispose_engine, get_engine
from src.platform.logging.loguru_io import Logger
from src.platform.observability.tracing import TracingConfig
from src.service.ticketing.driving_adapter.scheduler.reminder_scheduler import ReminderScheduler


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [Ticketing Service] Starting up...')

    tracing = TracingConfig(service_name='event-ticketing')
    tracing.setup()
    Logger.base.info('📊 [Ticketing Service] OpenTelemetry tracing configured')

    # Wire dependency injection for all modules
    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Ticketing Service] Dependency injection wired')

    await create_db_and_tables()
    tracing.instrument_sqlalchemy(engine=get_engine())
    Logger.base.info('🗄️  [Ticketing Service] Database ready + instrumented')

    async with anyio.create_task_group() as tg:
        if settings.ENABLE_REMINDER_SCHEDULER:
            scheduler = ReminderScheduler(
                use_case_factory=container.send_event_reminders_use_case,
                hour_utc=settings.REMINDER_HOUR_UTC,
            )
            tg.start_soon(scheduler.run_forever)
        else:
            Logger.base.info('⏭️  [Ticketing Service] Reminder scheduler disabled')

        Logger.base.info('✅ [Ticketing Service] Ready to serve requests')

        yield

        Logger.base.info('🛑 [Ticketing Service] Shutting down...')
        tg.cancel_scope.cancel()

    await dispose_engine()
    Logger.base.info('🗄️  [Ticketing Service] Database engine disposed')

    # Flush remaining spans
    tracing.shutdown()

    container.unwire()
    Logger.base.info('👋 [Ticketing Service] Shutdown complete')


# Create FastAPI app using shared factory
app = create_app(lifespan=lifespan)
