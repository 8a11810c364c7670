"""Agrégation des saisies en classement."""

import math
from typing import Dict, Iterable, List, Optional, Sequence

from thidua.core.models import ClassModel, RankingRow, ScoreEntry, ScoringConfig


def exact_sum(values: Iterable[float]) -> float:
    """
    Somme indépendante de l'ordre des termes.

    Entiers : somme exacte. Flottants finis : `math.fsum` (arrondi correct,
    donc résultat identique au bit près quelle que soit la permutation).
    NaN et infinis se propagent tels quels. Au-delà de la plage des
    flottants, le résultat suit l'arithmétique IEEE (±inf, NaN).
    """
    values = list(values)
    if all(isinstance(v, int) for v in values):
        return sum(values)
    try:
        return math.fsum(values)
    except (OverflowError, ValueError):
        # inf - inf, ou dépassement de capacité
        return _ieee_sum(values)


def _ieee_sum(values: List[float]) -> float:
    total = 0.0
    for v in values:
        try:
            total += v
        except OverflowError:
            # Entier trop grand pour un flottant
            total += math.inf if v > 0 else -math.inf
    return total


def _sort_key(row: RankingRow):
    # NaN en fin de classement
    return (isinstance(row.total, float) and math.isnan(row.total), -row.total)


def assign_ranks(rows: List[RankingRow], method: str = "ordinal") -> List[RankingRow]:
    """
    Attribue les rangs à des lignes déjà triées.

    Args:
        rows: lignes triées par total décroissant
        method: "ordinal" (1..N sans ex aequo) ou "min" (ex aequo au meilleur rang)
    """
    previous_total = None
    for index, row in enumerate(rows):
        if method == "min" and index > 0 and row.total == previous_total:
            row.rank = rows[index - 1].rank
        else:
            row.rank = index + 1
        previous_total = row.total
    return rows


class RankingAggregator:
    """Réduit le journal des saisies en classement des classes."""

    def __init__(self, config: Optional[ScoringConfig] = None):
        self.config = config or ScoringConfig()

    def aggregate(
        self,
        classes: Sequence[ClassModel],
        entries: Iterable[ScoreEntry]
    ) -> List[RankingRow]:
        """
        Calcule le classement complet.

        Chaque classe du référentiel apparaît une fois, même sans saisie.
        Les saisies d'une classe inconnue sont ignorées.

        Returns:
            Lignes triées par total décroissant, ex aequo dans l'ordre du référentiel
        """
        changes: Dict[str, List[float]] = {c.id: [] for c in classes}

        for entry in entries:
            bucket = changes.get(entry.class_id)
            if bucket is not None:
                bucket.append(entry.point_change)

        rows = []
        for class_model in classes:
            class_changes = changes[class_model.id]
            rows.append(RankingRow(
                class_model=class_model,
                plus=exact_sum(p for p in class_changes if p > 0),
                minus=exact_sum(p for p in class_changes if p < 0),
                total=exact_sum([self.config.base_score] + class_changes),
            ))

        rows.sort(key=_sort_key)
        return assign_ranks(rows, self.config.rank_method)

    def aggregate_weeks(
        self,
        classes: Sequence[ClassModel],
        entries: Iterable[ScoreEntry],
        week_ids: Iterable[str]
    ) -> List[RankingRow]:
        """Classement restreint aux saisies des semaines données."""
        selected = set(week_ids)
        return self.aggregate(classes, [e for e in entries if e.week_id in selected])


def aggregate(
    classes: Sequence[ClassModel],
    entries: Iterable[ScoreEntry],
    config: Optional[ScoringConfig] = None
) -> List[RankingRow]:
    """Raccourci fonctionnel pour `RankingAggregator(config).aggregate`."""
    return RankingAggregator(config).aggregate(classes, entries)
