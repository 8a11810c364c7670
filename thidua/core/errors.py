"""Exceptions du projet."""


class ThiDuaError(Exception):
    """Exception de base pour ThiDua."""
    pass


class WeekOrderError(ThiDuaError):
    """Les semaines ne sont pas dans l'ordre chronologique."""
    pass


class EntryValidationError(ThiDuaError):
    """Saisie de points refusée à l'ingestion."""
    pass


class RosterError(ThiDuaError):
    """Référentiel (classes, semaines, barème) invalide."""
    pass
