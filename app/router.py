"""
Simple phase router for the Streamlit app.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from app.screens.quiz import render_quiz_page
from app.screens.results import render_results_page
from app.screens.setup import render_setup_page
from core.quiz_controller import Phase, StateSnapshot


@dataclass(frozen=True)
class AppPage:
    title: str
    render: Callable[[StateSnapshot], None]


PAGES: dict[Phase, AppPage] = {
    Phase.SETUP: AppPage(title="Setup", render=render_setup_page),
    Phase.PLAYING: AppPage(title="Quiz", render=render_quiz_page),
    Phase.RESULTS: AppPage(title="Results", render=render_results_page),
}


def get_page(phase: Phase) -> AppPage:
    return PAGES[phase]
