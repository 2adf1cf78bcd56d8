#!/usr/bin/env python3
"""Basic usage example"""

import asyncio

from scoped_logger import (
    EventId,
    LoggerBuilder,
    LogLevel,
    MemoryLogger,
    WrappedLogger,
)
from scoped_logger.monitoring import MetricsCollector


class OrderService:
    pass


async def fetch(logger):
    async def body(scope, log):
        log.debug("fetching")
        await asyncio.sleep(0)
        log.info("fetched")

    await logger.with_scope_async("fetch", body)


def main():
    # Create logger with builder pattern
    logger = (LoggerBuilder()
        .with_source(OrderService)
        .with_level(LogLevel.DEBUG)
        .with_console(colored=True)
        .with_memory(capacity=100)
        .with_display(date=False)
        .build())

    collector = MetricsCollector().attach(logger)

    # Log messages
    logger.trace("This is trace")
    logger.debug("This is debug")
    logger.info("Application started")
    logger.warning("This is warning")
    logger.error("This is error", ValueError("bad input"))
    logger.critical("This is critical")
    logger.emit(LogLevel.INFO, EventId(7, "checkout"), {"order": 42})

    # Scopes
    with logger.scope("order 42"):
        logger.info("inside a scope")

    asyncio.run(fetch(logger))

    # Copy everything into an audit logger
    audit = MemoryLogger("audit")
    wrapped = WrappedLogger(MemoryLogger(OrderService), audit)
    wrapped.warning("audited")
    print(audit.messages_list()[0].text)

    print(collector.get_metrics().to_dict())


if __name__ == "__main__":
    main()
