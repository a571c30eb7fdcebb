"""Synchronize ideas between a client and a remote entries API."""
