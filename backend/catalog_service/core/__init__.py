"""Core utilities for the catalog service."""
