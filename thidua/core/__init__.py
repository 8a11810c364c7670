"""Core module - Logique métier pure."""

from thidua.core.ranking import RankingAggregator, aggregate
from thidua.core.trend import TrendSeriesBuilder, build_series, build_trend, select_top
from thidua.core.ordering import order_weeks, check_chronological
from thidua.core.errors import ThiDuaError, WeekOrderError, EntryValidationError, RosterError
from thidua.core.models import (
    ClassModel,
    Week,
    Fault,
    FaultType,
    ScoreEntry,
    RankingRow,
    TrendPoint,
    ScoringConfig
)

__all__ = [
    "RankingAggregator",
    "aggregate",
    "TrendSeriesBuilder",
    "build_series",
    "build_trend",
    "select_top",
    "order_weeks",
    "check_chronological",
    "ThiDuaError",
    "WeekOrderError",
    "EntryValidationError",
    "RosterError",
    "ClassModel",
    "Week",
    "Fault",
    "FaultType",
    "ScoreEntry",
    "RankingRow",
    "TrendPoint",
    "ScoringConfig",
]
