from __future__ import annotations

from typing import Any, Callable

import streamlit as st

from bank_client.config import configure_logging, get_backend_url
from bank_client.controllers import Error, Idle, Loading, PageController, PageState, Ready, run_page


def setup_page(title: str, icon: str = "🏦") -> None:
    st.set_page_config(page_title=f"SecureBank AI | {title}", page_icon=icon, layout="wide")
    configure_logging()


def render_state(state: PageState, on_ready: Callable[[Any], None], loading_text: str = "Memuat data...") -> None:
    """Affiche les quatre états possibles d'une page."""
    if isinstance(state, Ready):
        on_ready(state.data)
    elif isinstance(state, Error):
        st.error(f"Terjadi Kesalahan: {state.message}")
    elif isinstance(state, Loading):
        st.info(loading_text)
    elif isinstance(state, Idle):
        pass
    else:
        raise TypeError(f"État de page inconnu: {state!r}")


def load_and_render(
    controller: PageController,
    on_ready: Callable[[Any], None],
    loading_text: str = "Memuat data...",
) -> PageState:
    # rechargé à chaque affichage (pas de cache entre navigations)
    with st.spinner(loading_text):
        state = run_page(controller)
    render_state(state, on_ready, loading_text)
    st.caption(f"Backend: {get_backend_url()}")
    return state
