"""Chargeurs de données (référentiel YAML et saisies CSV)."""

import logging
import math
import os
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import pandas as pd
import yaml

from thidua.config import ROSTER_FILE
from thidua.core.errors import RosterError
from thidua.core.models import ClassModel, Fault, FaultType, ScoreEntry, Week

logger = logging.getLogger(__name__)


# Référentiel de démonstration (année 2025-2026)
SEED_ROSTER: Dict[str, Any] = {
    'active_year': '2025-2026',
    'classes': [
        {'id': 'C_6A', 'name': '6A', 'grade': 6},
        {'id': 'C_6B', 'name': '6B', 'grade': 6},
        {'id': 'C_7A', 'name': '7A', 'grade': 7},
        {'id': 'C_8A', 'name': '8A', 'grade': 8},
        {'id': 'C_9A', 'name': '9A', 'grade': 9},
    ],
    'weeks': [
        {'id': 'W_01', 'name': 'Tuần 1', 'month_id': 'M_09'},
        {'id': 'W_02', 'name': 'Tuần 2', 'month_id': 'M_09'},
        {'id': 'W_03', 'name': 'Tuần 3', 'month_id': 'M_09'},
        {'id': 'W_04', 'name': 'Tuần 4', 'month_id': 'M_10'},
    ],
    'faults': [
        {'id': 'F_01', 'name': 'Đi học muộn', 'point': -2, 'type': 'MINUS'},
        {'id': 'F_02', 'name': 'Không đồng phục', 'point': -2, 'type': 'MINUS'},
        {'id': 'F_03', 'name': 'Vệ sinh bẩn', 'point': -5, 'type': 'MINUS'},
        {'id': 'F_04', 'name': 'Nói chuyện riêng', 'point': -1, 'type': 'MINUS'},
        {'id': 'F_05', 'name': 'Đạt điểm tốt (Cả lớp)', 'point': 5, 'type': 'PLUS'},
        {'id': 'F_06', 'name': 'Tham gia phong trào', 'point': 10, 'type': 'PLUS'},
    ],
}


@dataclass
class Roster:
    """Référentiel d'une année scolaire."""
    active_year: Optional[str] = None
    classes: List[ClassModel] = field(default_factory=list)
    weeks: List[Week] = field(default_factory=list)
    faults: List[Fault] = field(default_factory=list)


class DataLoader(ABC):
    """Classe de base pour les chargeurs de données."""

    @abstractmethod
    def load(self):
        """Charge les données."""
        pass


def _check_unique(kind: str, items: List[Any]) -> None:
    seen = set()
    for item in items:
        if item.id in seen:
            raise RosterError(f"Identifiant {kind} en double: {item.id}")
        seen.add(item.id)


class RosterLoader(DataLoader):
    """Chargeur du référentiel (classes, semaines, barème) depuis un fichier YAML."""

    def __init__(self, path: str = ROSTER_FILE):
        self.path = path

    def _read(self) -> Dict[str, Any]:
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except FileNotFoundError:
            # Fallback sur le référentiel de démonstration
            logger.info("Référentiel %s absent, utilisation des données de démonstration", self.path)
            return SEED_ROSTER
        except yaml.YAMLError as e:
            raise RosterError(f"Fichier {self.path} illisible: {e}") from e

        if not isinstance(data, dict):
            raise RosterError(f"Fichier {self.path}: mapping attendu à la racine")
        return data

    def load(self) -> Roster:
        """Charge et valide le référentiel."""
        data = self._read()

        try:
            classes = [
                ClassModel(id=str(c['id']), name=str(c['name']), grade=int(c.get('grade', 0)))
                for c in data.get('classes', [])
            ]
            weeks = [
                Week(
                    id=str(w['id']),
                    name=str(w['name']),
                    month_id=w.get('month_id'),
                    position=w.get('position'),
                )
                for w in data.get('weeks', [])
            ]
            faults = [
                Fault(
                    id=str(f['id']),
                    name=str(f['name']),
                    point=f['point'],
                    type=FaultType(f.get('type') or ('PLUS' if f['point'] > 0 else 'MINUS')),
                )
                for f in data.get('faults', [])
            ]
        except (KeyError, TypeError, ValueError) as e:
            raise RosterError(f"Référentiel invalide ({self.path}): {e}") from e

        _check_unique("classe", classes)
        _check_unique("semaine", weeks)
        _check_unique("barème", faults)

        logger.info(
            "Référentiel chargé: %d classes, %d semaines, %d lignes de barème",
            len(classes), len(weeks), len(faults)
        )
        return Roster(
            active_year=data.get('active_year'),
            classes=classes,
            weeks=weeks,
            faults=faults,
        )


class EntriesCSVLoader(DataLoader):
    """
    Chargeur d'un journal de saisies CSV (séparateur `;`).

    Colonnes : id;week_id;class_id;point_change;note;created_at;created_by[;fault_id]
    """

    REQUIRED_COLUMNS = ['week_id', 'class_id', 'point_change']

    def __init__(self, path: str):
        self.path = path

    def load(self) -> List[ScoreEntry]:
        """Charge les saisies ; les lignes aux points illisibles sont ignorées."""
        df = pd.read_csv(self.path, sep=';', dtype=str, keep_default_na=False)

        missing = [c for c in self.REQUIRED_COLUMNS if c not in df.columns]
        if missing:
            source = getattr(self.path, "name", self.path)
            raise RosterError(f"Colonnes manquantes dans {os.path.basename(str(source))}: {missing}")

        entries = []
        for index, row in df.iterrows():
            try:
                point = float(row['point_change'])
            except ValueError:
                logger.warning("Ligne %d ignorée: points illisibles %r", index, row['point_change'])
                continue
            if not math.isfinite(point):
                logger.warning("Ligne %d ignorée: points non finis %r", index, row['point_change'])
                continue

            entries.append(ScoreEntry(
                id=row.get('id', '') or f"csv-{index}",
                week_id=row['week_id'],
                class_id=row['class_id'],
                point_change=int(point) if point.is_integer() else point,
                note=row.get('note', ''),
                created_at=row.get('created_at', ''),
                created_by=row.get('created_by', ''),
                fault_id=row.get('fault_id') or None,
            ))

        logger.info("%d saisies chargées depuis %s", len(entries), self.path)
        return entries
