"""Adapters implementing service-layer ports."""
