"""Transformateurs vers DataFrames pour l'affichage."""

from typing import List, Optional, Sequence

import pandas as pd

from thidua.core.models import RankingRow, ScoreEntry, TrendPoint, Week

RANKING_COLUMNS = ['rank', 'class_id', 'class_name', 'grade', 'base', 'plus', 'minus', 'total']


class DataTransformer:
    """Conversions des résultats du moteur en DataFrames."""

    @staticmethod
    def rankings_to_frame(rows: Sequence[RankingRow], base_score: float = 100) -> pd.DataFrame:
        """
        Tableau de classement, une ligne par classe dans l'ordre du classement.

        Args:
            rows: résultat de RankingAggregator.aggregate
            base_score: score de départ affiché dans la colonne `base`
        """
        data = [
            {
                'rank': row.rank,
                'class_id': row.class_model.id,
                'class_name': row.class_model.name,
                'grade': row.class_model.grade,
                'base': base_score,
                'plus': row.plus,
                'minus': row.minus,
                'total': row.total,
            }
            for row in rows
        ]
        return pd.DataFrame(data, columns=RANKING_COLUMNS)

    @staticmethod
    def series_to_frame(points: Sequence[TrendPoint]) -> pd.DataFrame:
        """Courbe en DataFrame : index = semaine, une colonne par classe."""
        df = pd.DataFrame([p.as_dict() for p in points])
        if df.empty:
            return pd.DataFrame(index=pd.Index([], name='name'))
        return df.set_index('name')

    @staticmethod
    def entries_to_frame(entries: Sequence[ScoreEntry]) -> pd.DataFrame:
        """Journal des saisies en DataFrame."""
        columns = ['id', 'week_id', 'class_id', 'fault_id', 'point_change', 'note', 'created_at', 'created_by']
        data = [{col: getattr(e, col) for col in columns} for e in entries]
        return pd.DataFrame(data, columns=columns)

    @staticmethod
    def weekly_deltas(
        entries: Sequence[ScoreEntry],
        weeks: Optional[Sequence[Week]] = None
    ) -> pd.DataFrame:
        """
        Somme des points par semaine (lignes) et par classe (colonnes).

        Si `weeks` est fourni, les lignes suivent cet ordre et les semaines
        sans saisie valent 0.
        """
        df = DataTransformer.entries_to_frame(entries)
        pivot = df.pivot_table(
            index='week_id',
            columns='class_id',
            values='point_change',
            aggfunc='sum',
            fill_value=0
        ) if not df.empty else pd.DataFrame()

        if weeks is not None:
            week_ids: List[str] = [w.id for w in weeks]
            pivot = pivot.reindex(week_ids, fill_value=0)
            pivot.index.name = 'week_id'
        return pivot
