"""Primitives shared by every application service."""
