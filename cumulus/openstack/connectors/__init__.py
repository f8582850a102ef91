"""Service connectors: one package per OpenStack service."""
