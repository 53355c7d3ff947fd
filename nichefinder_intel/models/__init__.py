"""Frozen pydantic models: upstream opportunity records and derived outputs."""
