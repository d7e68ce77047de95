"""Feature packages built on the platform adapters."""
