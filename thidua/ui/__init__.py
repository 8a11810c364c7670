"""UI module - Interface Streamlit."""

from thidua.ui.components.charts import TrendChart, BarChart, build_trend_figure
from thidua.ui.components.tables import DataTable, RankingTable
from thidua.ui.components.widgets import MetricCard, PointBadge, format_points

__all__ = [
    "TrendChart",
    "BarChart",
    "build_trend_figure",
    "DataTable",
    "RankingTable",
    "MetricCard",
    "PointBadge",
    "format_points",
]
