from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Generic, Optional, TypeVar, Union

import httpx
from loguru import logger

from bank_client import api, pages
from bank_client.api import BackendError
from bank_client.form import CustomerInputForm

T = TypeVar("T")


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Loading:
    pass


@dataclass(frozen=True)
class Ready(Generic[T]):
    data: T


@dataclass(frozen=True)
class Error:
    message: str


PageState = Union[Idle, Loading, Ready, Error]

Loader = Callable[[httpx.AsyncClient], Awaitable[T]]


class PageController(Generic[T]):
    """
    Chargement asynchrone d'une page : Idle -> Loading -> Ready(data) | Error(message).
    Chaque activation repart de zéro (pas de cache) ; une activation remplacée ou
    annulée ne peut plus écrire son résultat (compteur de génération).
    """

    def __init__(
        self,
        loader: Loader,
        fallback_message: str,
        client_factory: Optional[Callable[[], httpx.AsyncClient]] = None,
        name: str = "page",
    ):
        self.loader = loader
        self.fallback_message = fallback_message
        self.client_factory = client_factory
        self.name = name
        self.state: PageState = Idle()
        self._generation = 0
        self._task: Optional[asyncio.Task] = None

    def _set_state(self, generation: int, state: PageState) -> None:
        if generation != self._generation:
            logger.debug(f"[{self.name}] résultat périmé ignoré ({type(state).__name__})")
            return
        logger.debug(f"[{self.name}] {type(self.state).__name__} -> {type(state).__name__}")
        self.state = state

    def _make_client(self) -> httpx.AsyncClient:
        if self.client_factory is not None:
            return self.client_factory()
        return api.build_client()

    async def activate(self) -> PageState:
        self._generation += 1
        generation = self._generation
        self._set_state(generation, Loading())

        try:
            async with self._make_client() as client:
                data = await self.loader(client)
        except BackendError as exc:
            logger.warning(f"[{self.name}] backend error (status={exc.status_code}): {exc.message}")
            new_state: PageState = Error(exc.message)
        except httpx.HTTPError as exc:
            logger.warning(f"[{self.name}] transport error: {exc!r}")
            new_state = Error(self.fallback_message)
        except ValueError as exc:
            # JSON illisible ou payload hors schéma (pydantic.ValidationError)
            logger.warning(f"[{self.name}] invalid payload: {exc}")
            new_state = Error(self.fallback_message)
        else:
            new_state = Ready(data)

        self._set_state(generation, new_state)
        return self.state

    def start(self) -> asyncio.Task:
        """Lance activate() en tâche de fond (à appeler depuis une boucle active)."""
        self.deactivate()
        self._task = asyncio.ensure_future(self.activate())
        return self._task

    def deactivate(self) -> None:
        """Quitte la page : annule le chargement en cours et revient à Idle."""
        self._generation += 1
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None
        self.state = Idle()


def dashboard_controller(**kwargs: Any) -> PageController:
    return PageController(pages.load_dashboard, pages.DASHBOARD_ERROR, name="dashboard", **kwargs)


def insights_controller(**kwargs: Any) -> PageController:
    return PageController(pages.load_insights, pages.INSIGHTS_ERROR, name="insights", **kwargs)


def model_info_controller(**kwargs: Any) -> PageController:
    return PageController(pages.load_model_info, pages.MODEL_INFO_ERROR, name="model-info", **kwargs)


def prediction_controller(form: CustomerInputForm, **kwargs: Any) -> PageController:
    async def _submit(client: httpx.AsyncClient):
        return await pages.submit_prediction(client, form)

    return PageController(_submit, pages.PREDICTION_ERROR, name="predict", **kwargs)


def run_page(controller: PageController) -> PageState:
    """Point d'entrée synchrone (scripts Streamlit, CLI)."""
    return asyncio.run(controller.activate())
