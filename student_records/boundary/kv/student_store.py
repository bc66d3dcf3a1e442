"""
Student record store.

Maps record-level operations onto Redis hashes. The key for a record is the
configured namespace prefix followed by the record id (``student:<id>``);
the hash fields are the record's attribute names.

Every Redis failure is re-raised as StoreUnavailable so callers only deal
with a single failure category from this layer.

Dependencies: redis, student_records.core.exceptions
System role: Record Store Adapter between services and the key-value backend
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Mapping

from redis.asyncio import Redis
from redis.exceptions import RedisError

from student_records.core.exceptions import StoreUnavailable

logger = logging.getLogger(__name__)

DEFAULT_KEY_PREFIX = "student:"


class StudentStore:
    """
    Record-level adapter over a Redis client.

    Attributes:
        client: asyncio Redis client with ``decode_responses=True``
        key_prefix: Namespace prepended to every record id
    """

    def __init__(self, client: Redis, key_prefix: str = DEFAULT_KEY_PREFIX) -> None:
        """
        Initialize store with a Redis client.

        Args:
            client: asyncio Redis client
            key_prefix: Namespace prefix for record keys
        """
        self.client = client
        self.key_prefix = key_prefix

    def key_for(self, student_id: str) -> str:
        """Return the backend key for a record id."""
        return f"{self.key_prefix}{student_id}"

    @asynccontextmanager
    async def _command(self, operation: str, student_id: str | None = None) -> AsyncIterator[None]:
        try:
            yield
        except RedisError as e:
            logger.error(
                "Redis command failed",
                extra={
                    "operation": operation,
                    "student_id": student_id,
                    "error": str(e),
                    "error_type": type(e).__name__,
                },
            )
            raise StoreUnavailable(
                f"Student store unavailable: {e}",
                operation=operation,
                student_id=student_id,
            ) from e

    async def set_field(self, student_id: str, field: str, value: str) -> None:
        """
        Write one attribute of a record.

        Args:
            student_id: Record id
            field: Attribute name
            value: Attribute value, stored as text
        """
        async with self._command("set_field", student_id):
            await self.client.hset(self.key_for(student_id), field, value)

    async def set_fields(self, student_id: str, fields: Mapping[str, str]) -> None:
        """
        Write several attributes of a record in one ``HSET`` command.

        Args:
            student_id: Record id
            fields: Attribute name to value mapping
        """
        async with self._command("set_fields", student_id):
            await self.client.hset(self.key_for(student_id), mapping=dict(fields))

    async def get_all(self, student_id: str) -> dict[str, str]:
        """
        Read a record's full field-mapping.

        Args:
            student_id: Record id

        Returns:
            dict[str, str]: Stored attributes, empty if the record is absent
        """
        async with self._command("get_all", student_id):
            return await self.client.hgetall(self.key_for(student_id))

    async def list_ids(self) -> list[str]:
        """
        List every record id under the namespace prefix.

        Uses ``SCAN`` rather than ``KEYS`` so large keyspaces are walked
        incrementally. Ids keep any ``:`` they contain.

        Returns:
            list[str]: Record ids, prefix stripped
        """
        prefix_length = len(self.key_prefix)
        async with self._command("list_ids"):
            return [
                key[prefix_length:]
                async for key in self.client.scan_iter(match=f"{self.key_prefix}*")
            ]

    async def delete(self, student_id: str) -> None:
        """
        Remove a record. Deleting an absent id is not an error.

        Args:
            student_id: Record id
        """
        async with self._command("delete", student_id):
            await self.client.delete(self.key_for(student_id))

    async def ping(self) -> None:
        """
        Check the backend is reachable.

        Raises:
            StoreUnavailable: If the server does not answer
        """
        async with self._command("ping"):
            await self.client.ping()
