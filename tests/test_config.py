# tests/test_config.py
import logging
import os

import pytest

from thidua.config import load_scoring_config, setup_logger


@pytest.fixture
def no_dotenv(tmp_path):
    return str(tmp_path / ".env")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("THIDUA_BASE_SCORE", "THIDUA_TOP_N", "THIDUA_RANK_METHOD"):
        monkeypatch.delenv(name, raising=False)


def test_defaults(no_dotenv):
    config = load_scoring_config(no_dotenv)

    assert config.base_score == 100
    assert config.top_n == 5
    assert config.rank_method == "ordinal"


def test_from_environment(monkeypatch, no_dotenv):
    monkeypatch.setenv("THIDUA_BASE_SCORE", "80")
    monkeypatch.setenv("THIDUA_TOP_N", "3")
    monkeypatch.setenv("THIDUA_RANK_METHOD", "min")

    config = load_scoring_config(no_dotenv)

    assert config.base_score == 80
    assert isinstance(config.base_score, int)
    assert config.top_n == 3
    assert config.rank_method == "min"


def test_from_dotenv_file(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("THIDUA_BASE_SCORE=50.5\n", encoding="utf-8")

    config = load_scoring_config(str(env_file))
    # load_dotenv écrit directement dans os.environ
    os.environ.pop("THIDUA_BASE_SCORE", None)

    assert config.base_score == 50.5


@pytest.mark.parametrize("name, value", [
    ("THIDUA_BASE_SCORE", "cent"),
    ("THIDUA_BASE_SCORE", "nan"),
    ("THIDUA_BASE_SCORE", "inf"),
    ("THIDUA_TOP_N", "-1"),
    ("THIDUA_RANK_METHOD", "dense"),
])
def test_invalid_values(monkeypatch, no_dotenv, name, value):
    monkeypatch.setenv(name, value)

    with pytest.raises(ValueError, match="Configuration invalide"):
        load_scoring_config(no_dotenv)


def test_setup_logger_idempotent():
    logger = setup_logger("thidua.test")
    logger = setup_logger("thidua.test", level=logging.DEBUG)

    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG
