"""Friendbook: server-rendered management of friends, addresses, pets and quotes."""

__version__ = "0.1.0"
