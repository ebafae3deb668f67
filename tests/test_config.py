"""Tests for configuration loading and saving."""
from __future__ import annotations

import json
from unittest.mock import patch

from study_games.config import DEFAULTS, Settings, load_settings, save_settings


class TestSettings:
    def test_defaults(self):
        s = Settings()
        assert s.challenge_seconds == 60
        assert s.tick_interval == 1.0
        assert s.default_difficulty == "easy"

    def test_to_dict(self):
        d = Settings().to_dict()
        assert d == DEFAULTS

    def test_to_dict_roundtrip(self):
        s = Settings(challenge_seconds=90, match_pairs=6)
        s2 = Settings(**s.to_dict())
        assert s2.challenge_seconds == 90
        assert s2.match_pairs == 6

    def test_db_full_path_absolute(self, tmp_path):
        s = Settings(db_path=str(tmp_path / "x.db"))
        assert s.db_full_path == tmp_path / "x.db"


class TestLoadSaveSettings:
    def test_load_from_file(self, tmp_path):
        config_path = tmp_path / "config.json"
        config_path.write_text(json.dumps({"challenge_seconds": 30}))

        with patch("study_games.config.CONFIG_PATH", config_path):
            s = load_settings()
        assert s.challenge_seconds == 30
        assert s.default_difficulty == "easy"

    def test_load_missing_file(self, tmp_path):
        with patch("study_games.config.CONFIG_PATH", tmp_path / "nonexistent.json"):
            s = load_settings()
        assert s.challenge_seconds == 60

    def test_save_creates_file(self, tmp_path):
        config_path = tmp_path / "config.json"
        with patch("study_games.config.CONFIG_PATH", config_path):
            save_settings(Settings(default_difficulty="hard"))

        data = json.loads(config_path.read_text())
        assert data["default_difficulty"] == "hard"

    def test_unknown_keys_ignored(self, tmp_path):
        config_path = tmp_path / "config.json"
        config_path.write_text(json.dumps({"match_pairs": 4, "llm_provider": "ollama"}))

        with patch("study_games.config.CONFIG_PATH", config_path):
            s = load_settings()
        assert s.match_pairs == 4
        assert not hasattr(s, "llm_provider")
