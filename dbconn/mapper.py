"""
mapper.py

converts between the on-disk config records and Connection entities.

ids are filled in on the way in and on the way out, emulating a database that
assigns them. ids generated by from_config are not persisted by that step.
database host/port/id are never written; they come from the parent connection
on the next load.
"""

from __future__ import annotations

import uuid
from typing import Any

from .models import Auth, Connection, Database


def new_id() -> str:
    return str(uuid.uuid4())


def _as_record(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _auth_from_config(value: Any) -> Any:
    if isinstance(value, dict):
        return Auth.model_construct(
            id=value.get("id"),
            username=value.get("username"),
            password=value.get("password"),
        )
    # anything else truthy is carried as-is
    return value or None


def connection_from_config(record: dict[str, Any]) -> Connection:
    # loaded records are taken as they are on disk, types included
    record = _as_record(record)
    conn = Connection.model_construct(
        id=record.get("id") or new_id(),
        name=record.get("name"),
        host=record.get("host"),
        port=record.get("port"),
        databases=[],
    )

    databases = record.get("databases")
    for db in databases if isinstance(databases, list) else []:
        db = _as_record(db)
        conn.databases.append(Database.model_construct(
            id=db.get("id") or new_id(),
            name=db.get("name"),
            host=conn.host,
            port=conn.port,
            auth=_auth_from_config(db.get("auth")),
        ))

    return conn


def from_config(records: list[dict[str, Any]]) -> list[Connection]:
    return [connection_from_config(r) for r in records]


def connection_to_config(conn: Connection) -> dict[str, Any]:
    databases: list[dict[str, Any]] = []
    for db in conn.databases:
        out: dict[str, Any] = {"name": db.name}
        if db.auth is not None:
            out["auth"] = {
                "id": getattr(db.auth, "id", None) or new_id(),
                "username": getattr(db.auth, "username", None),
                "password": getattr(db.auth, "password", None),
            }
        databases.append(out)

    return {
        "id": conn.id or new_id(),
        "name": conn.name,
        "host": conn.host,
        "port": conn.port,
        "databases": databases,
    }


def to_config(connections: list[Connection]) -> list[dict[str, Any]]:
    return [connection_to_config(c) for c in connections]
