"""Shared test doubles for engine and worker ports."""
