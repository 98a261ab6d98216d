"""Connectors: console REPL and event sinks."""
