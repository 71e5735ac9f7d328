"""FastAPI application exposing the roll-table operations."""
