"""Widgets réutilisables pour l'interface."""

import streamlit as st
from typing import Optional


def format_points(value: float) -> str:
    """Points signés, sans décimales inutiles : +5, -2, +0.5."""
    rounded = round(value, 2)
    if float(rounded).is_integer():
        rounded = int(rounded)
    return f"+{rounded}" if rounded > 0 else f"{rounded}"


class MetricCard:
    """Carte de métrique avec valeur et description."""

    def __init__(
        self,
        label: str,
        value: str,
        delta: Optional[str] = None,
        help_text: Optional[str] = None
    ):
        self.label = label
        self.value = value
        self.delta = delta
        self.help_text = help_text

    def render(self):
        st.metric(
            label=self.label,
            value=self.value,
            delta=self.delta,
            help=self.help_text
        )


class PointBadge:
    """Pastille colorée pour une variation de points."""

    def __init__(self, value: float):
        self.value = value

    def render(self) -> str:
        icon = "🟢" if self.value > 0 else "🔴" if self.value < 0 else "⚪"
        return f"{icon} {format_points(self.value)}"
