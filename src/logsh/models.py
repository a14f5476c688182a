"""Pydantic schemas for the persisted logsh configuration."""
from typing import Optional

from pydantic import BaseModel, Field


class ConnectionInfo(BaseModel):
    """One configured logship server endpoint."""
    endpoint: str


class Configuration(BaseModel):
    """Full persisted user state for the CLI."""
    connections: list[ConnectionInfo] = Field(default_factory=list)

    def find_connection(self, endpoint: str) -> Optional[ConnectionInfo]:
        endpoint = endpoint.strip()
        for conn in self.connections:
            if conn.endpoint == endpoint:
                return conn
        return None

    def upsert_connection(self, endpoint: str) -> bool:
        """Add endpoint unless already present. Returns True if added."""
        if self.find_connection(endpoint) is not None:
            return False
        self.connections.append(ConnectionInfo(endpoint=endpoint.strip()))
        return True

    def remove_connection(self, endpoint: str) -> bool:
        """Remove endpoint. Returns True if something was removed."""
        conn = self.find_connection(endpoint)
        if conn is None:
            return False
        self.connections.remove(conn)
        return True
