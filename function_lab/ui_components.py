"""Streamlit widgets for choosing and showing a problem."""
from __future__ import annotations

from typing import List, Tuple

import streamlit as st

from . import config
from .models import DifficultyTier, FunctionFamily

FAMILY_LABELS = {
    FunctionFamily.LINEAR: "Linear",
    FunctionFamily.QUADRATIC: "Quadratic",
    FunctionFamily.POLYNOMIAL: "Cubic polynomial",
    FunctionFamily.RATIONAL: "Rational",
    FunctionFamily.TRIGONOMETRIC: "Trigonometric",
    FunctionFamily.CIRCLE: "Circle",
}

DIFFICULTY_LABELS = {
    DifficultyTier.EASY: "Easy",
    DifficultyTier.MEDIUM: "Medium",
    DifficultyTier.HARD: "Hard",
}


def problem_controls() -> Tuple[FunctionFamily, DifficultyTier]:
    families = list(FunctionFamily)
    tiers = list(DifficultyTier)
    family = st.radio(
        "Function type",
        options=families,
        index=families.index(FunctionFamily.parse(config.DEFAULT_FAMILY)),
        format_func=FAMILY_LABELS.get,
        key="family_choice",
    )
    difficulty = st.radio(
        "Difficulty",
        options=tiers,
        index=tiers.index(DifficultyTier.parse(config.DEFAULT_DIFFICULTY)),
        format_func=DIFFICULTY_LABELS.get,
        horizontal=True,
        key="difficulty_choice",
    )
    return family, difficulty


def checklist(title: str, steps: List[str], *, key_prefix: str) -> int:
    st.subheader(title)
    done = 0
    for i, step in enumerate(steps):
        if st.checkbox(step, key=f"{key_prefix}_{i}"):
            done += 1
    st.progress(done / len(steps) if steps else 0.0)
    return done
