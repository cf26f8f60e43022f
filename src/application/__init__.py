"""Application layer: configuration, logging and pipeline orchestration."""
