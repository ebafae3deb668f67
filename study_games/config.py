from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

CONFIG_PATH = Path(__file__).resolve().parent.parent / "config.json"

DEFAULTS = {
    "db_path": "study_games.db",
    "challenge_seconds": 60,
    "tick_interval": 1.0,
    "default_difficulty": "easy",
    "match_pairs": 8,
    "seed_sample_decks": True,
}


@dataclass
class Settings:
    db_path: str = DEFAULTS["db_path"]
    challenge_seconds: int = DEFAULTS["challenge_seconds"]
    tick_interval: float = DEFAULTS["tick_interval"]
    default_difficulty: str = DEFAULTS["default_difficulty"]
    match_pairs: int = DEFAULTS["match_pairs"]
    seed_sample_decks: bool = DEFAULTS["seed_sample_decks"]

    @property
    def project_root(self) -> Path:
        return Path(__file__).resolve().parent.parent

    @property
    def db_full_path(self) -> Path:
        return self.project_root / self.db_path

    def to_dict(self) -> dict:
        return {
            "db_path": self.db_path,
            "challenge_seconds": self.challenge_seconds,
            "tick_interval": self.tick_interval,
            "default_difficulty": self.default_difficulty,
            "match_pairs": self.match_pairs,
            "seed_sample_decks": self.seed_sample_decks,
        }


def load_settings() -> Settings:
    if CONFIG_PATH.exists():
        raw = json.loads(CONFIG_PATH.read_text())
        known = {f.name for f in Settings.__dataclass_fields__.values()}
        filtered = {k: v for k, v in raw.items() if k in known}
        return Settings(**filtered)
    return Settings()


def save_settings(settings: Settings) -> None:
    CONFIG_PATH.write_text(json.dumps(settings.to_dict(), indent=4) + "\n")
