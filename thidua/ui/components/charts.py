"""Composants graphiques avec Plotly."""

from abc import ABC, abstractmethod
from typing import List, Sequence

import streamlit as st
import plotly.graph_objects as go

from thidua.core.models import TrendPoint

SERIES_COLORS = ['#3B82F6', '#EF4444', '#10B981', '#F59E0B', '#8B5CF6']


class ChartComponent(ABC):
    """Classe de base pour les graphiques."""

    @abstractmethod
    def build_figure(self) -> go.Figure:
        pass

    def render(self):
        st.plotly_chart(self.build_figure(), use_container_width=True)


def build_trend_figure(points: Sequence[TrendPoint], title: str = "") -> go.Figure:
    """
    Une courbe par classe suivie, semaines en abscisse.

    Les classes sont tracées dans l'ordre des valeurs du premier point,
    c'est-à-dire l'ordre du classement.
    """
    fig = go.Figure()
    weeks: List[str] = [p.name for p in points]
    class_names = list(points[0].values) if points else []

    for idx, class_name in enumerate(class_names):
        fig.add_trace(go.Scatter(
            x=weeks,
            y=[p.values.get(class_name) for p in points],
            mode="lines+markers",
            name=class_name,
            line=dict(color=SERIES_COLORS[idx % len(SERIES_COLORS)], width=2),
            marker=dict(size=8)
        ))

    fig.update_layout(
        title=title,
        xaxis_title="Semaine",
        yaxis_title="Total cumulé",
        hovermode="x unified",
    )
    return fig


class TrendChart(ChartComponent):
    """Évolution cumulée des classes de tête."""

    def __init__(self, points: Sequence[TrendPoint], title: str = ""):
        self.points = points
        self.title = title

    def build_figure(self) -> go.Figure:
        return build_trend_figure(self.points, self.title)


class BarChart(ChartComponent):
    """Points gagnés / perdus par classe."""

    def __init__(self, labels: Sequence[str], plus: Sequence[float], minus: Sequence[float], title: str = ""):
        self.labels = list(labels)
        self.plus = list(plus)
        self.minus = list(minus)
        self.title = title

    def build_figure(self) -> go.Figure:
        fig = go.Figure()
        fig.add_trace(go.Bar(x=self.labels, y=self.plus, name="Points gagnés", marker_color="#10B981"))
        fig.add_trace(go.Bar(x=self.labels, y=self.minus, name="Points perdus", marker_color="#EF4444"))
        fig.update_layout(title=self.title, barmode="relative")
        return fig
