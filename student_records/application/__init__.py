"""Application layer: use-case services and CSV parsing."""
