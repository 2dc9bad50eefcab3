"""FastAPI application factory."""

import asyncio
from contextlib import asynccontextmanager

from fastapi import FastAPI

from config import load_config
from ids.generator import Generator
from internal.health import (
    HealthChecker,
    check_event_loop,
    create_clock_check,
    create_codec_check,
)
from internal.logging import get_logger, LogLevel, StructuredLogger
from service import auth
from service.routes import health, identifiers
from utils import crash
from utils.timestamp import verify_clock


def create_app(config=None, generator=None):
    """Create and configure the FastAPI application."""
    config = config or load_config()

    # Configure structured logging
    StructuredLogger.configure(min_level=LogLevel.parse(config.logging.level))
    logger_instance = get_logger()

    # One generator per process, shared by every route
    generator = generator or Generator.from_config(config.generator)
    crash.configure(config.logging.crash_file, generator)
    health_checker = HealthChecker()
    health_checker.register("event_loop", check_event_loop, critical=True)
    health_checker.register("clock", create_clock_check(generator.clock), critical=False)
    health_checker.register("codec", create_codec_check(generator), critical=True)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup
        logger_instance.info("Application starting", version="1.0.0", entropy=generator.entropy.name)
        if config.generator.clock_policy == "strict":
            verify_clock()
        loop = asyncio.get_running_loop()
        loop.set_exception_handler(crash.create_async_handler(logger_instance))
        logger_instance.info("Application started successfully")

        yield

        # Shutdown
        logger_instance.info("Application shutdown complete")

    app = FastAPI(
        title="Sortable ID Service",
        version="1.0.0",
        description="time-ordered 128-bit identifier generation and decoding",
        lifespan=lifespan,
    )
    app.state.generator = generator

    # Initialize route modules with dependencies
    auth.init(config.auth)
    identifiers.init(generator, config.generator.max_batch)
    health.init(generator, health_checker)

    # Include routers
    app.include_router(identifiers.router)
    app.include_router(health.router)

    return app
