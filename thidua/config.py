"""Configuration (variables d'environnement) et logging."""

import logging
import os

from dotenv import load_dotenv

from thidua.core.models import ScoringConfig

ROOT_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
ROSTER_FILE = os.path.join(ROOT_DIR, "config", "roster.yaml")


def _to_number(value: str) -> float:
    """Entier si possible, sinon flottant."""
    try:
        return int(value)
    except ValueError:
        return float(value)


def load_scoring_config(dotenv_path: str = None) -> ScoringConfig:
    """
    Charge la configuration du moteur depuis l'environnement (.env inclus).

    Variables reconnues : THIDUA_BASE_SCORE, THIDUA_TOP_N, THIDUA_RANK_METHOD.

    Raises:
        ValueError: si une valeur n'est pas interprétable
    """
    load_dotenv(dotenv_path)
    defaults = ScoringConfig()

    base_score = os.getenv('THIDUA_BASE_SCORE')
    top_n = os.getenv('THIDUA_TOP_N')

    try:
        return ScoringConfig(
            base_score=_to_number(base_score) if base_score else defaults.base_score,
            top_n=int(top_n) if top_n else defaults.top_n,
            rank_method=os.getenv('THIDUA_RANK_METHOD', defaults.rank_method),
        )
    except ValueError as e:
        raise ValueError(f"Configuration invalide: {e}") from e


def setup_logger(name: str = "thidua", level: int = logging.INFO) -> logging.Logger:
    """Configure le logger du projet (sortie console)."""
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Évite les doublons si appelé plusieurs fois
    if logger.hasHandlers():
        logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter('%(asctime)s - %(levelname)s - %(message)s'))
    logger.addHandler(console_handler)

    return logger
