"""
main.py

establishes fastapi routes over the connection repository
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import Depends, FastAPI, HTTPException, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from .config_store import ConfigFileStore
from .errors import ConnectionNotFoundError, InternalServiceError
from .models import Connection, ConnectionCreate
from .repository import ConnectionRepository
from .settings import CONNECTIONS_PATH, CORS_ORIGINS, LOG_LEVEL


logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)


def get_repository(request: Request) -> ConnectionRepository:
    return request.app.state.repository


def create_app(repository: ConnectionRepository | None = None) -> FastAPI:
    app = FastAPI(title="db connections", version="0.1.0")
    app.state.repository = repository or ConnectionRepository(ConfigFileStore(CONNECTIONS_PATH))

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    def health():
        return {"ok": True}

    @app.get("/connections")
    async def list_connections(repo: ConnectionRepository = Depends(get_repository)) -> list[dict[str, Any]]:
        # stored records are returned as found, not re-validated
        return [c.model_dump(warnings=False) for c in await repo.list()]

    @app.post("/connections", response_model=Connection, status_code=201)
    async def create_connection(
        req: ConnectionCreate,
        repo: ConnectionRepository = Depends(get_repository),
    ) -> Connection:
        try:
            return await repo.create(req)
        except InternalServiceError as e:
            raise HTTPException(status_code=400, detail=str(e))

    @app.delete("/connections/{connection_id}", status_code=204)
    async def delete_connection(
        connection_id: str,
        repo: ConnectionRepository = Depends(get_repository),
    ) -> Response:
        try:
            await repo.delete(connection_id)
        except ConnectionNotFoundError:
            raise HTTPException(status_code=404, detail=f"unknown connection: {connection_id}")
        return Response(status_code=204)

    return app


app = create_app()
