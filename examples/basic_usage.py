#!/usr/bin/env python3
"""Basic usage example"""

import asyncio

from context_logger import LoggerBuilder, LogLevel, RequestContext, create_logger, logger


async def handle_request(name: str, delay: float):
    logger.info(f"{name} started")
    await asyncio.sleep(delay)
    logger.info(f"{name} completed")


async def concurrent_requests():
    # Each request sees only its own identifiers
    await asyncio.gather(
        RequestContext.run_async({"traceId": "trace-req1", "userId": "user-1"}, handle_request, "Request 1", 0.10),
        RequestContext.run_async({"traceId": "trace-req2", "userId": "user-2"}, handle_request, "Request 2", 0.15),
        RequestContext.run_async({"traceId": "trace-req3", "userId": "user-3"}, handle_request, "Request 3", 0.05),
    )


def main():
    # Context is picked up automatically
    with RequestContext.scope(traceId="trace-001", requestId="req-001", userId="user-alice"):
        logger.info("User logged in successfully")
        logger.warn("API rate limit approaching", {"current": 95, "limit": 100})

        try:
            raise TimeoutError("Database connection timeout")
        except TimeoutError as e:
            logger.error("Database operation failed", e, {"operation": "query", "table": "users"})

        # Child loggers for scoped logging
        auth_logger = logger.child({"module": "auth", "version": "1.0.0"})
        auth_logger.info("Checking credentials", {"method": "jwt"})

    # Outside any scope: no identifiers, no errors
    logger.info("Background job started", {"job": "cleanup", "schedule": "daily"})

    # Custom configuration
    custom_logger = create_logger(
        minLevel="debug",
        prettyPrint=True,
        defaultMetadata={"service": "api-gateway", "environment": "production"},
    )
    with RequestContext.scope(traceId="trace-005", userId="user-eve"):
        custom_logger.debug("Debug information", {"cacheHit": True, "latency": 5})

    # Builder pattern
    builder_logger = (LoggerBuilder()
        .with_level(LogLevel.WARN)
        .with_default_metadata(service="worker")
        .with_console()
        .build())
    builder_logger.info("Filtered out")
    builder_logger.warn("Queue backlog growing", {"depth": 1200})

    asyncio.run(concurrent_requests())


if __name__ == "__main__":
    main()
