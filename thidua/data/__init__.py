"""Data module - Chargement, état en mémoire et transformation des données."""

from thidua.data.loaders import DataLoader, RosterLoader, EntriesCSVLoader, Roster, SEED_ROSTER
from thidua.data.store import ScoreStore, Snapshot
from thidua.data.transformers import DataTransformer

__all__ = [
    "DataLoader",
    "RosterLoader",
    "EntriesCSVLoader",
    "Roster",
    "SEED_ROSTER",
    "ScoreStore",
    "Snapshot",
    "DataTransformer",
]
