"""Adapters for the external engines, workers and services trackmux drives."""
