"""État applicatif en mémoire : référentiel et journal des saisies."""

import logging
import math
import uuid
from dataclasses import dataclass
from datetime import datetime
from numbers import Real
from typing import Dict, List, Optional, Tuple

from thidua.core.errors import EntryValidationError
from thidua.core.models import ClassModel, Fault, RankingRow, ScoreEntry, ScoringConfig, TrendPoint, Week
from thidua.core.ranking import RankingAggregator
from thidua.core.ordering import order_weeks
from thidua.core.trend import build_trend
from thidua.data.loaders import Roster

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Snapshot:
    """Copie figée de l'état, passée telle quelle au moteur."""
    classes: Tuple[ClassModel, ...]
    weeks: Tuple[Week, ...]
    faults: Tuple[Fault, ...]
    entries: Tuple[ScoreEntry, ...]


class ScoreStore:
    """
    Journal des saisies d'une année scolaire.

    Les saisies sont validées à l'entrée puis seulement ajoutées :
    jamais modifiées ni supprimées. Aucune persistance.
    """

    def __init__(self, roster: Roster, config: Optional[ScoringConfig] = None):
        self.active_year = roster.active_year
        self.classes = list(roster.classes)
        self.weeks = list(roster.weeks)
        self.faults = list(roster.faults)
        self.config = config or ScoringConfig()
        self._entries: List[ScoreEntry] = []

        self._classes_by_id: Dict[str, ClassModel] = {c.id: c for c in self.classes}
        self._weeks_by_id: Dict[str, Week] = {w.id: w for w in self.weeks}
        self._faults_by_id: Dict[str, Fault] = {f.id: f for f in self.faults}

    @property
    def entries(self) -> Tuple[ScoreEntry, ...]:
        return tuple(self._entries)

    def add_entry(
        self,
        week_id: str,
        class_id: str,
        fault_id: str,
        point_change: Optional[float] = None,
        note: Optional[str] = None,
        created_by: str = ""
    ) -> ScoreEntry:
        """
        Valide et enregistre une saisie.

        Args:
            week_id: semaine concernée
            class_id: classe concernée
            fault_id: ligne du barème choisie (obligatoire)
            point_change: points appliqués (par défaut ceux du barème)
            note: commentaire (par défaut le libellé du barème)
            created_by: auteur de la saisie

        Raises:
            EntryValidationError: référence inconnue ou points invalides
        """
        if not fault_id:
            raise EntryValidationError("Aucune ligne du barème sélectionnée")
        fault = self._faults_by_id.get(fault_id)
        if fault is None:
            raise EntryValidationError(f"Ligne du barème inconnue: {fault_id}")
        if week_id not in self._weeks_by_id:
            raise EntryValidationError(f"Semaine inconnue: {week_id}")
        if class_id not in self._classes_by_id:
            raise EntryValidationError(f"Classe inconnue: {class_id}")

        if point_change is None:
            point_change = fault.point
        if isinstance(point_change, bool) or not isinstance(point_change, Real):
            raise EntryValidationError(f"Points non numériques: {point_change!r}")
        if not math.isfinite(point_change):
            raise EntryValidationError(f"Points non finis: {point_change!r}")

        entry = ScoreEntry(
            id=uuid.uuid4().hex,
            week_id=week_id,
            class_id=class_id,
            point_change=point_change,
            note=fault.name if note is None else note,
            created_at=datetime.now().isoformat(),
            created_by=created_by,
            fault_id=fault_id,
        )
        self._entries.append(entry)
        logger.info("Saisie %s: classe %s, semaine %s, %+g", entry.id, class_id, week_id, point_change)
        return entry

    def extend(self, entries: List[ScoreEntry]) -> None:
        """
        Ajoute des saisies déjà constituées (import CSV).

        Tout ou rien : si une saisie est refusée, aucune n'est ajoutée.

        Raises:
            EntryValidationError: référence inconnue, points invalides
                ou identifiant déjà présent
        """
        seen = {e.id for e in self._entries}
        for entry in entries:
            if entry.id in seen:
                raise EntryValidationError(f"Saisie déjà enregistrée: {entry.id}")
            seen.add(entry.id)
            if entry.week_id not in self._weeks_by_id:
                raise EntryValidationError(f"Saisie {entry.id}: semaine inconnue {entry.week_id}")
            if entry.class_id not in self._classes_by_id:
                raise EntryValidationError(f"Saisie {entry.id}: classe inconnue {entry.class_id}")
            if entry.fault_id is not None and entry.fault_id not in self._faults_by_id:
                raise EntryValidationError(f"Saisie {entry.id}: ligne du barème inconnue {entry.fault_id}")
            point = entry.point_change
            if isinstance(point, bool) or not isinstance(point, Real) or not math.isfinite(point):
                raise EntryValidationError(f"Saisie {entry.id}: points invalides {point!r}")

        self._entries.extend(entries)
        logger.info("%d saisies importées", len(entries))

    def snapshot(self) -> Snapshot:
        return Snapshot(
            classes=tuple(self.classes),
            weeks=tuple(self.weeks),
            faults=tuple(self.faults),
            entries=tuple(self._entries),
        )

    def recent_entries(self, n: int = 3) -> List[ScoreEntry]:
        """Dernières saisies, la plus récente en premier."""
        if n <= 0:
            return []
        return list(reversed(self._entries[-n:]))

    def class_name(self, class_id: str) -> str:
        class_model = self._classes_by_id.get(class_id)
        return class_model.name if class_model else class_id

    def rankings(self, week_ids: Optional[List[str]] = None) -> List[RankingRow]:
        """Classement courant, éventuellement restreint à certaines semaines."""
        snap = self.snapshot()
        aggregator = RankingAggregator(self.config)
        if week_ids is None:
            return aggregator.aggregate(snap.classes, snap.entries)
        return aggregator.aggregate_weeks(snap.classes, snap.entries, week_ids)

    def trend(self) -> List[TrendPoint]:
        """Courbe cumulée des `top_n` premières classes."""
        snap = self.snapshot()
        return build_trend(snap.classes, order_weeks(snap.weeks), snap.entries, self.config)
