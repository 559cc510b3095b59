"""
models.py

pydantic entities for connections and their databases, plus the create payload.

fields are optional on the entities because records loaded from disk may be
missing anything; absent values stay None.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Auth(BaseModel):
    id: str | None = None
    username: str | None = None
    password: str | None = None


class Database(BaseModel):
    id: str | None = None
    name: str | None = None
    host: str | None = None
    port: int | None = None
    auth: Auth | None = None


class Connection(BaseModel):
    id: str | None = None
    name: str | None = None
    host: str | None = None
    port: int | None = None
    databases: list[Database] = Field(default_factory=list)

    def add_database(
        self,
        *,
        id: str | None = None,
        name: str | None = None,
        host: str | None = None,
        port: int | None = None,
        auth: Auth | dict | None = None,
    ) -> Database:
        if isinstance(auth, dict):
            auth = Auth(**auth)
        db = Database(id=id, name=name, host=host, port=port, auth=auth)
        self.databases.append(db)
        return db


class ConnectionCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str | None = Field(None, description="ignored, always replaced by a generated id")
    name: str
    host: str
    port: int
    database_name: str = Field(..., alias="databaseName")
    auth: Auth | None = None
