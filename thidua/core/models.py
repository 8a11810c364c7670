"""Modèles de données."""

import math
from dataclasses import dataclass, field
from enum import Enum
from numbers import Integral, Real
from typing import Dict, Optional, Any, Mapping


class FaultType(str, Enum):
    """Nature d'une ligne du barème."""
    PLUS = "PLUS"
    MINUS = "MINUS"


RANK_METHODS = ("ordinal", "min")


def _as_int(value: Any, name: str) -> int:
    """Entier, ou flottant sans partie décimale ; refuse le reste."""
    if isinstance(value, bool):
        raise ValueError(f"{name} doit être entier: {value!r}")
    if isinstance(value, Integral):
        return int(value)
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise ValueError(f"{name} doit être entier: {value!r}")


@dataclass(frozen=True)
class ClassModel:
    """Classe de l'établissement (donnée de référence)."""
    id: str = ""
    name: str = ""
    grade: int = 0


@dataclass(frozen=True)
class Week:
    """
    Semaine du calendrier d'émulation.

    L'ordre de la liste fait office de chronologie. `position` permet
    de la rendre explicite (voir `thidua.core.ordering`).
    """
    id: str = ""
    name: str = ""
    month_id: Optional[str] = None
    position: Optional[int] = None


@dataclass(frozen=True)
class Fault:
    """Ligne du barème : faute (points négatifs) ou mérite (positifs)."""
    id: str = ""
    name: str = ""
    point: float = 0.0
    type: FaultType = FaultType.MINUS


@dataclass(frozen=True)
class ScoreEntry:
    """Saisie de points pour une classe et une semaine. Jamais modifiée."""
    id: str = ""
    week_id: str = ""
    class_id: str = ""
    point_change: float = 0.0
    note: str = ""
    created_at: str = ""
    created_by: str = ""
    fault_id: Optional[str] = None


@dataclass
class RankingRow:
    """Ligne du classement (dérivée, non persistée)."""
    class_model: ClassModel
    plus: float = 0
    minus: float = 0
    total: float = 0
    rank: int = 0


@dataclass
class TrendPoint:
    """Totaux cumulés des classes suivies à la fin d'une semaine."""
    name: str = ""
    values: Dict[str, float] = field(default_factory=dict)

    def as_dict(self) -> Dict[str, Any]:
        """Ligne à plat pour les graphiques : {"name": ..., "6A": 105, ...}."""
        row: Dict[str, Any] = {"name": self.name}
        row.update(self.values)
        return row


@dataclass(frozen=True)
class ScoringConfig:
    """Configuration du moteur de classement."""
    base_score: float = 100
    top_n: int = 5
    rank_method: str = "ordinal"

    def __post_init__(self):
        if isinstance(self.base_score, bool) or not isinstance(self.base_score, Real):
            raise ValueError(f"base_score doit être numérique: {self.base_score!r}")
        if isinstance(self.base_score, float) and not math.isfinite(self.base_score):
            raise ValueError(f"base_score doit être fini: {self.base_score!r}")
        if isinstance(self.top_n, bool) or not isinstance(self.top_n, int):
            raise ValueError(f"top_n doit être entier: {self.top_n!r}")
        if self.top_n < 0:
            raise ValueError(f"top_n doit être positif: {self.top_n}")
        if self.rank_method not in RANK_METHODS:
            raise ValueError(f"Méthode de rang inconnue: {self.rank_method}")

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> "ScoringConfig":
        """
        Construit la configuration depuis les options reconnues.

        Args:
            options: dict avec `baseScore`, `topN`, `rankMethod` (tous optionnels)
        """
        defaults = cls()
        return cls(
            base_score=options.get("baseScore", defaults.base_score),
            top_n=_as_int(options.get("topN", defaults.top_n), "topN"),
            rank_method=options.get("rankMethod", defaults.rank_method),
        )
