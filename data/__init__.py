"""Bundled game reference data."""
