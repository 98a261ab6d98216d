"""Ports and shared state used by the core and its connectors."""
