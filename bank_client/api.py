from __future__ import annotations

import asyncio
import time
from typing import Any, Iterable, List, Optional, Sequence, Tuple

import httpx
from loguru import logger

from bank_client.config import get_backend_url, get_timeout


class BackendError(Exception):
    """Échec présentable tel quel à l'utilisateur (message serveur ou message de repli)."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def build_client(
    base_url: Optional[str] = None,
    timeout: Optional[float] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        base_url=base_url or get_backend_url(),
        timeout=get_timeout() if timeout is None else timeout,
        transport=transport,
        headers={"Accept": "application/json"},
    )


def _message_from_body(body: Any, keys: Iterable[str]) -> Optional[str]:
    if not isinstance(body, dict):
        return None
    for key in keys:
        value = body.get(key)
        if isinstance(value, str) and value.strip():
            return value
        # FastAPI 422 : detail = [{"loc": [...], "msg": "...", "type": "..."}]
        if isinstance(value, list) and value and isinstance(value[0], dict):
            msg = value[0].get("msg")
            if isinstance(msg, str) and msg.strip():
                return msg
    return None


def error_message(response: httpx.Response, fallback: str, keys: Sequence[str] = ("detail",)) -> str:
    try:
        body = response.json()
    except ValueError:
        return fallback
    return _message_from_body(body, keys) or fallback


def read_json(response: httpx.Response, fallback: str, keys: Sequence[str] = ("detail",)) -> Any:
    """
    Statut non-2xx -> BackendError (message serveur ou repli de l'endpoint).
    Corps 2xx illisible -> ValueError, traité comme payload invalide par le contrôleur.
    """
    if not response.is_success:
        raise BackendError(error_message(response, fallback, keys), status_code=response.status_code)
    return response.json()


async def _timed_request(client: httpx.AsyncClient, method: str, path: str, **kwargs: Any) -> httpx.Response:
    t0 = time.perf_counter()
    response = await client.request(method, path, **kwargs)
    latency_ms = (time.perf_counter() - t0) * 1000.0
    logger.debug(f"{method} {path} -> {response.status_code} ({latency_ms:.1f} ms)")
    return response


async def get_json(client: httpx.AsyncClient, path: str, fallback: str) -> Any:
    response = await _timed_request(client, "GET", path)
    return read_json(response, fallback)


async def get_many(client: httpx.AsyncClient, requests: Sequence[Tuple[str, str]]) -> List[Any]:
    """
    GET concurrents : on attend que tout soit terminé avant de trancher.
    Pas de succès partiel : la première erreur (transport puis statut, dans l'ordre) l'emporte.
    requests : liste de (path, message de repli).
    """
    responses = await asyncio.gather(
        *(_timed_request(client, "GET", path) for path, _ in requests),
        return_exceptions=True,
    )

    for res in responses:
        if isinstance(res, BaseException):
            raise res

    return [read_json(res, fallback) for res, (_, fallback) in zip(responses, requests)]


async def post_json(client: httpx.AsyncClient, path: str, payload: Any) -> httpx.Response:
    return await _timed_request(client, "POST", path, json=payload)
