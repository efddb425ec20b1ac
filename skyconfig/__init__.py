"""Layered runtime configuration resolution for the server process."""
