"""
Key-value boundary: Redis connection lifecycle and the student record store.

Exports:
  - create_redis_client(), connect_redis(), close_redis(): Connection lifecycle
  - StudentStore: Record-level adapter keyed by student id
"""

from student_records.boundary.kv.connection import (
    close_redis,
    connect_redis,
    create_redis_client,
)
from student_records.boundary.kv.student_store import StudentStore

__all__ = [
    "close_redis",
    "connect_redis",
    "create_redis_client",
    "StudentStore",
]
