"""Core domain layer: exception hierarchy shared by every layer."""
