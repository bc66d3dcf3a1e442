"""
Redis connection management.

Provides client construction with the configured timeouts, a fail-fast
connect used at application startup, and teardown on shutdown.

Dependencies: redis, student_records.configs
System role: Record store connection lifecycle management
"""

import logging

from redis.asyncio import Redis
from redis.exceptions import RedisError

from student_records.configs.redis import RedisSettings
from student_records.core.exceptions import StoreUnavailable

logger = logging.getLogger(__name__)


def create_redis_client(settings: RedisSettings) -> Redis:
    """
    Create an asyncio Redis client from settings.

    No connection is opened until the first command. Responses are decoded
    to ``str`` so record fields round-trip as text.

    Args:
        settings: Redis connection settings

    Returns:
        Redis: Configured client backed by a connection pool
    """
    return Redis.from_url(
        settings.redis_url,
        decode_responses=True,
        socket_timeout=settings.socket_timeout,
        socket_connect_timeout=settings.socket_connect_timeout,
    )


async def connect_redis(settings: RedisSettings) -> Redis:
    """
    Create a client and verify the server answers ``PING``.

    Args:
        settings: Redis connection settings

    Returns:
        Redis: Connected client

    Raises:
        StoreUnavailable: If the server cannot be reached
    """
    client = create_redis_client(settings)
    try:
        await client.ping()
    except RedisError as e:
        await client.aclose()
        raise StoreUnavailable(
            f"Redis connection failed: {e}",
            operation="connect",
            details={"host": settings.host, "port": settings.port},
        ) from e

    logger.info(
        "Connected to Redis",
        extra={"host": settings.host, "port": settings.port, "db": settings.db},
    )
    return client


async def close_redis(client: Redis) -> None:
    """
    Close the client and release its connection pool.

    Args:
        client: Client returned by connect_redis
    """
    await client.aclose()
    logger.info("Redis connection closed")
