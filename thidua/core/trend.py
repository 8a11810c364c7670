"""Séries cumulées par semaine pour les classes de tête."""

from collections import defaultdict
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from thidua.core.models import ClassModel, RankingRow, ScoreEntry, ScoringConfig, TrendPoint, Week
from thidua.core.ranking import RankingAggregator, exact_sum


def select_top(rows: Sequence[RankingRow], top_n: int) -> List[ClassModel]:
    """Retourne les `top_n` premières classes d'un classement."""
    return [row.class_model for row in rows[:top_n]]


class TrendSeriesBuilder:
    """Construit la courbe d'évolution des classes suivies."""

    def __init__(self, config: Optional[ScoringConfig] = None):
        self.config = config or ScoringConfig()

    def build_series(
        self,
        top_classes: Sequence[ClassModel],
        weeks: Sequence[Week],
        entries: Iterable[ScoreEntry]
    ) -> List[TrendPoint]:
        """
        Calcule un point par semaine avec le total cumulé de chaque classe.

        Les semaines sont parcourues dans l'ordre reçu, sans tri : la
        chronologie est à la charge de l'appelant. Une semaine sans saisie
        produit quand même un point (le total est reporté).

        Args:
            top_classes: classes à suivre (en général la tête du classement)
            weeks: semaines dans l'ordre chronologique
            entries: journal complet des saisies

        Returns:
            Liste de TrendPoint, de même longueur que `weeks`
        """
        tracked = {c.id for c in top_classes}
        buckets: Dict[Tuple[str, str], List[float]] = defaultdict(list)
        for entry in entries:
            if entry.class_id in tracked:
                buckets[(entry.week_id, entry.class_id)].append(entry.point_change)

        running = {c.id: self.config.base_score for c in top_classes}
        points = []

        for week in weeks:
            point = TrendPoint(name=week.name)
            for class_model in top_classes:
                delta = exact_sum(buckets.get((week.id, class_model.id), []))
                running[class_model.id] += delta
                point.values[class_model.name] = running[class_model.id]
            points.append(point)

        return points


def build_series(
    top_classes: Sequence[ClassModel],
    weeks: Sequence[Week],
    entries: Iterable[ScoreEntry],
    config: Optional[ScoringConfig] = None
) -> List[TrendPoint]:
    """Raccourci fonctionnel pour `TrendSeriesBuilder(config).build_series`."""
    return TrendSeriesBuilder(config).build_series(top_classes, weeks, entries)


def build_trend(
    classes: Sequence[ClassModel],
    weeks: Sequence[Week],
    entries: Sequence[ScoreEntry],
    config: Optional[ScoringConfig] = None
) -> List[TrendPoint]:
    """Classement puis courbe des `top_n` premières classes."""
    config = config or ScoringConfig()
    rows = RankingAggregator(config).aggregate(classes, entries)
    top_classes = select_top(rows, config.top_n)
    return TrendSeriesBuilder(config).build_series(top_classes, weeks, entries)
