"""CLI entry point for study-games.

Usage:
  python -m study_games serve [--port PORT] [--host HOST] [--no-seed]
  python -m study_games decks
  python -m study_games seed
  python -m study_games scores
  python -m study_games reset-scores
"""
from __future__ import annotations

import os
import sys

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8766


def main(argv: list[str] | None = None):
    args = sys.argv[1:] if argv is None else argv
    command = args[0] if args else "serve"
    handler = COMMANDS.get(command)
    if handler is None:
        print(f"Unknown command: {command}")
        print(f"Commands: {', '.join(COMMANDS)}")
        sys.exit(1)
    handler(args[1:])


def _options(args: list[str]) -> dict[str, str]:
    """``--name value`` pairs; a flag with no value maps to ''."""
    opts: dict[str, str] = {}
    name = None
    for arg in args:
        if arg.startswith("--"):
            name = arg[2:]
            opts[name] = ""
        elif name is not None:
            opts[name] = arg
            name = None
    return opts


def _serve(args: list[str]):
    import uvicorn

    opts = _options(args)
    host = opts.get("host") or DEFAULT_HOST
    try:
        port = int(opts.get("port") or DEFAULT_PORT)
    except ValueError:
        print(f"Invalid port: {opts['port']}")
        sys.exit(1)

    # Read by the app's startup hook.
    if "no-seed" in opts:
        os.environ["STUDY_GAMES_NO_SEED"] = "1"
    print(f"Study Games on http://{host}:{port} (Ctrl+C to quit)")
    try:
        uvicorn.run("study_games.app:app", host=host, port=port)
    finally:
        os.environ.pop("STUDY_GAMES_NO_SEED", None)


def _open_db():
    from study_games.config import load_settings
    from study_games.db import Database

    return Database(load_settings().db_full_path)


def _decks(args: list[str]):
    db = _open_db()
    decks = db.get_all_decks()
    if not decks:
        print("No decks. Run 'seed' to add the sample decks.")
    for d in decks:
        counts = d.mastery_counts()
        print(f"  {d.title} [{d.subject or '-'}]")
        print(
            f"    {len(d.cards)} cards, {d.mastery_percentage:.0f}% mastered "
            f"(new {counts['new']}, learning {counts['learning']}, mastered {counts['mastered']})"
        )
    db.close()


def _seed(args: list[str]):
    from study_games.sample_decks import sample_decks

    db = _open_db()
    for d in sample_decks():
        db.save_deck(d)
        print(f"  Added: {d.title} ({len(d.cards)} cards)")
    print(f"\nTotal decks: {db.get_deck_count()}")
    db.close()


def _scores(args: list[str]):
    from study_games.word_builder import BEST_STREAK_KEY, HIGH_SCORE_KEY

    db = _open_db()
    print(f"Word Builder high score: {db.get_int(HIGH_SCORE_KEY)}")
    print(f"Word Builder best streak: {db.get_int(BEST_STREAK_KEY)}")
    db.close()


def _reset_scores(args: list[str]):
    from study_games.word_builder import BEST_STREAK_KEY, HIGH_SCORE_KEY

    db = _open_db()
    db.delete_keys(HIGH_SCORE_KEY, BEST_STREAK_KEY)
    print("Word Builder scores reset.")
    db.close()


COMMANDS = {
    "serve": _serve,
    "decks": _decks,
    "seed": _seed,
    "scores": _scores,
    "reset-scores": _reset_scores,
}


if __name__ == "__main__":
    main()
