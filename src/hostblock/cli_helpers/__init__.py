"""Helpers used by the hostblock CLI."""
