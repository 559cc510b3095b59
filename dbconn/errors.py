"""
errors.py

exceptions raised by the connection repository. storage failures (OSError,
json decode errors) are not wrapped and reach callers as-is.
"""

from __future__ import annotations


class ConnectionStoreError(Exception):
    pass


class InternalServiceError(ConnectionStoreError):
    """a required call argument was missing or unusable."""


class ConnectionNotFoundError(ConnectionStoreError):
    def __init__(self, connection_id: str):
        super().__init__(f"Connection not found: {connection_id}")
        self.connection_id = connection_id
