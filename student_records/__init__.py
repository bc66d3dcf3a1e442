"""Student records service: Redis-backed CRUD and CSV ingestion over HTTP."""

__version__ = "0.1.0"
