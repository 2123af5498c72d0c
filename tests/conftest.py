# Shared fixtures — an in-memory file server behind httpx.ASGITransport.
# Created: 2026-10-19

from __future__ import annotations

import posixpath
from typing import Any

import httpx
import pytest
from fastapi import APIRouter, FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from pawpicker.transport import FilesClient

HOME = "/home/user"

DEFAULT_TREE: dict[str, Any] = {
    "home": {
        "user": {
            "docs": {
                "report.md": "# Report\n",
            },
            "notes.txt": "hello world",
        },
    },
    "etc": {
        "hosts": "127.0.0.1 localhost\n",
    },
}


def create_file_server(
    tree: dict[str, Any] | None = None,
    *,
    forbidden: set[str] | None = None,
) -> FastAPI:
    """Build a FastAPI app serving ``/api/v1/files/browse`` and ``read-file``.

    Directories are dicts, files are strings. Paths in *forbidden* answer
    with HTTP 403. Every request is recorded on ``app.state.requests``.
    """
    root = tree if tree is not None else DEFAULT_TREE
    blocked = forbidden or set()

    def resolve(path: str) -> str:
        if path in ("", "~"):
            return HOME
        if path.startswith("~/"):
            path = HOME + path[1:]
        elif not path.startswith("/"):
            path = f"{HOME}/{path}"
        return posixpath.normpath(path).replace("//", "/")

    def lookup(path: str) -> Any:
        node: Any = root
        for part in path.split("/"):
            if not part:
                continue
            if not isinstance(node, dict) or part not in node:
                return None
            node = node[part]
        return node

    router = APIRouter(prefix="/v1/files")

    @router.get("/browse")
    async def browse(request: Request, path: str = "~", mode: str = "all"):
        request.app.state.requests.append(request)
        current = resolve(path)
        if current in blocked:
            return JSONResponse({"detail": "Forbidden"}, status_code=403)

        node = lookup(current)
        if node is None:
            return {"entries": [], "current": path, "parent": None, "error": "Path does not exist"}
        if not isinstance(node, dict):
            return {"entries": [], "current": path, "parent": None, "error": "Not a directory"}

        names = sorted(node, key=lambda n: (not isinstance(node[n], dict), n.lower()))
        entries = [
            {
                "name": name,
                "type": "dir" if isinstance(node[name], dict) else "file",
                "path": posixpath.join(current, name),
            }
            for name in names
        ]
        parent = None if current == "/" else posixpath.dirname(current)
        return {"entries": entries, "current": current, "parent": parent}

    @router.get("/read-file")
    async def read_file(request: Request, path: str):
        request.app.state.requests.append(request)
        resolved = resolve(path)
        node = lookup(resolved)
        if node is None:
            return PlainTextResponse("File not found", status_code=404)
        if isinstance(node, dict):
            return PlainTextResponse("Is a directory", status_code=400)
        return {"path": resolved, "name": posixpath.basename(resolved), "content": node}

    app = FastAPI()
    app.include_router(router, prefix="/api")
    app.state.requests = []
    return app


@pytest.fixture
def make_file_server():
    """Factory for file servers with a custom tree or forbidden paths."""
    return create_file_server


@pytest.fixture
def file_server():
    return create_file_server()


@pytest.fixture
async def client(file_server):
    async with FilesClient(
        "http://testserver/api", transport=httpx.ASGITransport(app=file_server)
    ) as files_client:
        yield files_client
