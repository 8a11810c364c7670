# tests/conftest.py
import pytest
import os
import sys

# Ajoute le répertoire parent au path pour les imports
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from thidua.core.models import ClassModel, Fault, FaultType, ScoreEntry, Week
from thidua.data.loaders import Roster


def make_entry(class_id, point, week_id="W1", entry_id=None):
    """Saisie minimale pour les tests."""
    return ScoreEntry(
        id=entry_id or f"{week_id}-{class_id}-{point}",
        week_id=week_id,
        class_id=class_id,
        point_change=point,
    )


@pytest.fixture
def classes():
    """Trois classes, dans l'ordre du référentiel."""
    return [
        ClassModel(id="A", name="6A", grade=6),
        ClassModel(id="B", name="6B", grade=6),
        ClassModel(id="C", name="7A", grade=7),
    ]


@pytest.fixture
def weeks():
    return [
        Week(id="W1", name="Tuần 1", month_id="M_09", position=1),
        Week(id="W2", name="Tuần 2", month_id="M_09", position=2),
        Week(id="W3", name="Tuần 3", month_id="M_10", position=3),
    ]


@pytest.fixture
def roster(classes, weeks):
    return Roster(
        active_year="2025-2026",
        classes=classes,
        weeks=weeks,
        faults=[
            Fault(id="F_LATE", name="Đi học muộn", point=-2, type=FaultType.MINUS),
            Fault(id="F_GOOD", name="Tham gia phong trào", point=10, type=FaultType.PLUS),
        ],
    )
