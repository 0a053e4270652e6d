"""FastAPI application factory."""

import asyncio
from contextlib import asynccontextmanager

from fastapi import FastAPI

from config import load_config
from core.health import (
    get_health_checker,
    check_event_loop,
    create_clock_check,
    create_entropy_check,
    create_service_check,
    create_logger_check,
)
from internal.logging import get_logger, LogLevel, StructuredLogger, AuditFileLogger
from slugs.service import SlugService
from utils.crash import create_async_handler
from ui.routes import api, health, issue

VERSION = "1.0.0"


def create_app(config=None):
    """Create and configure the FastAPI application."""
    config = config or load_config()

    # Configure structured logging
    StructuredLogger.configure(min_level=LogLevel[config.logging.level.upper()])
    logger_instance = get_logger()

    service = SlugService(config=config.slugs)
    audit = AuditFileLogger(file_path=config.logging.file)
    health_checker = get_health_checker()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup
        logger_instance.info("Application starting", version=VERSION)
        loop = asyncio.get_running_loop()
        loop.set_exception_handler(create_async_handler(logger_instance))

        await audit.start()

        health_checker.register("event_loop", check_event_loop, critical=True)
        health_checker.register("clock", create_clock_check(), critical=True)
        health_checker.register("entropy", create_entropy_check(), critical=True)
        health_checker.register("slug_service", create_service_check(service), critical=False)
        health_checker.register("audit_logger", create_logger_check(audit), critical=False)

        logger_instance.info("Application started successfully",
                             default_length=config.slugs.default_length, sampling=config.slugs.sampling)

        yield

        # Shutdown
        logger_instance.info("Application shutting down")
        await audit.stop()
        logger_instance.info("Application shutdown complete", **service.get_stats())

    app = FastAPI(
        title="Unique Slugs",
        version=VERSION,
        description="time-derived random slug service",
        lifespan=lifespan,
    )
    app.state.service = service
    app.state.audit = audit

    # Initialize route modules with dependencies
    issue.init(service, audit)
    api.init(service, audit)
    health.init(service, health_checker)

    # Include routers
    app.include_router(issue.router)
    app.include_router(api.router)
    app.include_router(health.router)

    return app
