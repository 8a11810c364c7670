"""Ordre chronologique des semaines."""

from typing import List, Sequence

from thidua.core.errors import WeekOrderError
from thidua.core.models import Week


def has_positions(weeks: Sequence[Week]) -> bool:
    """Vrai si toutes les semaines portent une position explicite."""
    return bool(weeks) and all(w.position is not None for w in weeks)


def order_weeks(weeks: Sequence[Week]) -> List[Week]:
    """
    Trie les semaines par `position` quand elle est renseignée partout.

    Sinon l'ordre reçu est conservé tel quel (ordre de saisie = chronologie).
    """
    if not has_positions(weeks):
        return list(weeks)
    return sorted(weeks, key=lambda w: w.position)


def check_chronological(weeks: Sequence[Week]) -> None:
    """
    Vérifie que la liste respecte les positions explicites.

    Les semaines sans position ne sont pas contrôlées.

    Raises:
        WeekOrderError: si une position est inférieure à la précédente
    """
    previous = None
    for week in weeks:
        if week.position is None:
            continue
        if previous is not None and week.position < previous.position:
            raise WeekOrderError(
                f"Semaine {week.id} (position {week.position}) "
                f"après {previous.id} (position {previous.position})"
            )
        previous = week
