"""FastAPI application with all routes."""
from __future__ import annotations

import dataclasses
import json
import logging
import os
import uuid

logging.basicConfig(level=logging.INFO, format="%(name)s | %(message)s")

from fastapi import FastAPI, HTTPException, Request

from study_games.config import Settings, load_settings, save_settings
from study_games.countdown import Countdown
from study_games.db import Database
from study_games.deck_detail import DeckDetail
from study_games.models import CardMastery, Deck, Difficulty, Flashcard, StudyMode
from study_games.sample_decks import sample_decks
from study_games.study import ClassicStudy, MatchStudy, QuizStudy
from study_games.word_builder import BEST_STREAK_KEY, HIGH_SCORE_KEY, WordBuilderGame

app = FastAPI(title="Study Games")

# Global state (initialized in startup)
_db: Database | None = None
_settings: Settings | None = None
_games: dict[str, dict] = {}  # game_id -> {"game": WordBuilderGame, "countdown": Countdown}
_studies: dict[str, dict] = {}  # study_id -> {"deck_id": str, "session": StudySession}

_log = logging.getLogger("study_games.api")


def get_db() -> Database:
    assert _db is not None
    return _db


def get_settings() -> Settings:
    assert _settings is not None
    return _settings


async def _body(request: Request) -> dict:
    raw = await request.body()
    if not raw:
        return {}
    try:
        body = json.loads(raw)
    except json.JSONDecodeError:
        raise HTTPException(400, "Malformed JSON body")
    if not isinstance(body, dict):
        raise HTTPException(400, "Expected a JSON object")
    return body


def _require(body: dict, key: str):
    """Fetch a required field; strings are trimmed and blank counts as missing."""
    value = body.get(key)
    if isinstance(value, str):
        value = value.strip()
    if value is None or value == "":
        raise HTTPException(400, f"Missing '{key}'")
    return value


def _enum(cls, value):
    try:
        return cls(value)
    except ValueError:
        raise HTTPException(400, f"Invalid {cls.__name__}: {value!r}")


def _seed_samples(db: Database) -> int:
    decks = sample_decks()
    for d in decks:
        db.save_deck(d)
    return len(decks)


@app.on_event("startup")
async def startup():
    global _db, _settings
    if _db is not None:
        return  # Already initialized (e.g. by tests)
    _settings = load_settings()
    _db = Database(_settings.db_full_path)
    if _settings.seed_sample_decks and not os.environ.get("STUDY_GAMES_NO_SEED"):
        if _db.get_deck_count() == 0:
            n = _seed_samples(_db)
            _log.info("Seeded %d sample decks", n)


@app.on_event("shutdown")
async def shutdown():
    for entry in _games.values():
        entry["countdown"].stop()
    if _db:
        _db.close()


# ── API: Settings ─────────────────────────────────────────────────────────

@app.get("/api/settings")
async def api_get_settings():
    return get_settings().to_dict()


@app.put("/api/settings")
async def api_update_settings(request: Request):
    global _settings
    body = await _body(request)
    s = get_settings()
    current = s.to_dict()
    for key, value in body.items():
        if key in current:
            current[key] = value
    _enum(Difficulty, current["default_difficulty"])
    _settings = Settings(**current)
    save_settings(_settings)
    return _settings.to_dict()


# ── API: Decks ────────────────────────────────────────────────────────────

def _load_deck(deck_id: str) -> Deck:
    deck = get_db().get_deck(deck_id)
    if deck is None:
        raise HTTPException(404, "Deck not found")
    return deck


def _detail(deck: Deck) -> DeckDetail:
    db = get_db()
    return DeckDetail(
        deck,
        on_save=lambda: db.save_deck(deck),
        on_delete=lambda: db.delete_deck(deck.id),
        match_pairs=get_settings().match_pairs,
    )


@app.get("/api/decks")
async def api_decks():
    return [
        {
            "id": d.id,
            "title": d.title,
            "subject": d.subject,
            "card_count": len(d.cards),
            "mastery_percentage": round(d.mastery_percentage, 1),
            "date_modified": d.date_modified.isoformat(),
        }
        for d in get_db().get_all_decks()
    ]


@app.post("/api/decks")
async def api_create_deck(request: Request):
    body = await _body(request)
    subject = body.get("subject") or ""
    deck = Deck(title=str(_require(body, "title")), subject=str(subject).strip())
    get_db().save_deck(deck)
    _log.info("Created deck %s (%s)", deck.id, deck.title)
    return _detail(deck).snapshot()


@app.post("/api/decks/samples")
async def api_seed_samples():
    n = _seed_samples(get_db())
    return {"added": n, "total_decks": get_db().get_deck_count()}


@app.get("/api/decks/{deck_id}")
async def api_deck(deck_id: str):
    return _detail(_load_deck(deck_id)).snapshot()


@app.delete("/api/decks/{deck_id}")
async def api_delete_deck(deck_id: str):
    detail = _detail(_load_deck(deck_id))
    detail.request_delete()
    detail.confirm_delete()
    for study_id in [s for s, e in _studies.items() if e["deck_id"] == deck_id]:
        del _studies[study_id]
    return {"deleted": deck_id}


@app.post("/api/decks/{deck_id}/cards")
async def api_add_card(deck_id: str, request: Request):
    body = await _body(request)
    detail = _detail(_load_deck(deck_id))
    detail.show_add_card()
    card = detail.add_card(str(_require(body, "front")), str(_require(body, "back")))
    if card is None:
        raise HTTPException(400, "Card front and back must not be blank")
    return {"card": card.to_dict(), "deck": detail.snapshot()}


@app.put("/api/decks/{deck_id}/cards/{card_id}")
async def api_edit_card(deck_id: str, card_id: str, request: Request):
    body = await _body(request)
    deck = _load_deck(deck_id)
    detail = _detail(deck)
    if not detail.begin_edit(card_id):
        raise HTTPException(404, "Card not found")
    current = deck.cards[deck.find_card(card_id)]
    changes = {k: str(_require(body, k)) for k in ("front", "back") if k in body}
    if "mastery" in body:
        changes["mastery"] = _enum(CardMastery, body["mastery"])
    if not detail.edit_card(dataclasses.replace(current, **changes)):
        raise HTTPException(400, "Card front and back must not be blank")
    updated = deck.cards[deck.find_card(card_id)]
    return {"card": updated.to_dict(), "deck": detail.snapshot()}


@app.delete("/api/decks/{deck_id}/cards/{card_id}")
async def api_delete_card(deck_id: str, card_id: str):
    detail = _detail(_load_deck(deck_id))
    if not detail.delete_card(card_id):
        raise HTTPException(404, "Card not found")
    return detail.snapshot()


# ── API: Study sessions ───────────────────────────────────────────────────

def _save_graded_card(deck_id: str, card: Flashcard) -> None:
    """Store one graded card into the current copy of its deck.

    The session's deck may be stale, so the deck is reloaded and only this
    card is replaced. Nothing is written once the deck or card is gone.
    """
    db = get_db()
    deck = db.get_deck(deck_id)
    idx = deck.find_card(card.id) if deck else None
    if idx is None:
        _log.info("Study grade for card %s dropped: no longer in deck %s", card.id, deck_id)
        return
    deck.cards[idx] = card
    db.save_deck(deck)


@app.post("/api/decks/{deck_id}/study")
async def api_start_study(deck_id: str, request: Request):
    body = await _body(request)
    mode = _enum(StudyMode, _require(body, "mode"))
    detail = _detail(_load_deck(deck_id))
    session = detail.launch_study(
        mode, on_grade=lambda card: _save_graded_card(deck_id, card)
    )
    if session is None:
        raise HTTPException(409, "Deck has no cards to study")
    study_id = uuid.uuid4().hex
    _studies[study_id] = {"deck_id": deck_id, "session": session}
    return {"study_id": study_id, **session.snapshot()}


def _get_study(study_id: str):
    entry = _studies.get(study_id)
    if entry is None:
        raise HTTPException(404, "Study session not found")
    return entry["session"]


@app.get("/api/study/{study_id}")
async def api_study(study_id: str):
    return {"study_id": study_id, **_get_study(study_id).snapshot()}


@app.post("/api/study/{study_id}/{action}")
async def api_study_action(study_id: str, action: str, request: Request):
    session = _get_study(study_id)
    body = await _body(request)
    applied: bool | None

    if isinstance(session, ClassicStudy) and action == "flip":
        session.flip()
        applied = True
    elif isinstance(session, ClassicStudy) and action in ("correct", "incorrect"):
        applied = session.mark_correct() if action == "correct" else session.mark_incorrect()
    elif isinstance(session, QuizStudy) and action == "answer":
        applied = session.answer(str(body.get("text", ""))) is not None
    elif isinstance(session, QuizStudy) and action == "next":
        applied = session.next()
    elif isinstance(session, MatchStudy) and action in ("select-front", "select-back"):
        card_id = _require(body, "card_id")
        if action == "select-front":
            session.select_front(card_id)
        else:
            session.select_back(card_id)
        applied = True
    else:
        raise HTTPException(400, f"Unknown action '{action}' for {session.mode.value} mode")

    if not applied:
        raise HTTPException(409, f"Action '{action}' not available")
    return {"study_id": study_id, **session.snapshot()}


@app.delete("/api/study/{study_id}")
async def api_end_study(study_id: str):
    _get_study(study_id)
    del _studies[study_id]
    return {"ended": study_id}


# ── API: Word Builder ─────────────────────────────────────────────────────

def _game_entry(game_id: str) -> dict:
    entry = _games.get(game_id)
    if entry is None:
        raise HTTPException(404, "Game not found")
    return entry


def _game_state(game_id: str) -> dict:
    return {"game_id": game_id, **_games[game_id]["game"].snapshot()}


def _sync_countdown(entry: dict) -> None:
    game, countdown = entry["game"], entry["countdown"]
    if game.challenge_mode and game.timer_active:
        countdown.start()
    else:
        countdown.stop()


@app.post("/api/word-builder")
async def api_new_game(request: Request):
    body = await _body(request)
    s = get_settings()
    difficulty = _enum(Difficulty, body.get("difficulty", s.default_difficulty))
    game = WordBuilderGame(
        difficulty=difficulty,
        store=get_db(),
        challenge_seconds=s.challenge_seconds,
    )
    if body.get("challenge"):
        game.set_challenge_mode(True)
    game.load_new_word()
    game_id = uuid.uuid4().hex
    entry = {"game": game, "countdown": Countdown(game, interval=s.tick_interval)}
    _games[game_id] = entry
    _sync_countdown(entry)
    return _game_state(game_id)


@app.get("/api/word-builder/{game_id}")
async def api_game(game_id: str):
    _game_entry(game_id)
    return _game_state(game_id)


@app.delete("/api/word-builder/{game_id}")
async def api_end_game(game_id: str):
    entry = _game_entry(game_id)
    entry["countdown"].stop()
    del _games[game_id]
    return {"ended": game_id}


@app.post("/api/word-builder/{game_id}/check")
async def api_game_check(game_id: str):
    game = _game_entry(game_id)["game"]
    if game.check_word() is None:
        raise HTTPException(409, "Place every letter before checking")
    return _game_state(game_id)


@app.post("/api/word-builder/{game_id}/challenge")
async def api_game_challenge(game_id: str, request: Request):
    body = await _body(request)
    entry = _game_entry(game_id)
    entry["game"].set_challenge_mode(bool(body.get("enabled")))
    _sync_countdown(entry)
    return _game_state(game_id)


@app.post("/api/word-builder/{game_id}/difficulty")
async def api_game_difficulty(game_id: str, request: Request):
    body = await _body(request)
    entry = _game_entry(game_id)
    entry["game"].set_difficulty(_enum(Difficulty, _require(body, "difficulty")))
    _sync_countdown(entry)
    return _game_state(game_id)


@app.post("/api/word-builder/{game_id}/reset")
async def api_game_reset(game_id: str):
    entry = _game_entry(game_id)
    entry["game"].reset()
    _sync_countdown(entry)
    return _game_state(game_id)


_GAME_ACTIONS = {
    "place": lambda g, b: g.place_letter(_require(b, "letter_id")),
    "return": lambda g, b: g.return_letter(_require(b, "letter_id")),
    "shuffle": lambda g, b: g.shuffle_rack(),
    "clear": lambda g, b: g.clear_board(),
    "hint/first-letter": lambda g, b: g.reveal_first_letter(),
    "hint/definition": lambda g, b: g.reveal_definition(),
    "next": lambda g, b: g.next_word(),
}


@app.post("/api/word-builder/{game_id}/{action:path}")
async def api_game_action(game_id: str, action: str, request: Request):
    game = _game_entry(game_id)["game"]
    handler = _GAME_ACTIONS.get(action)
    if handler is None:
        raise HTTPException(400, f"Unknown action '{action}'")
    body = await _body(request)
    if not handler(game, body):
        raise HTTPException(409, f"Action '{action}' not available")
    return _game_state(game_id)


@app.get("/api/scores")
async def api_scores():
    db = get_db()
    return {
        "high_score": db.get_int(HIGH_SCORE_KEY),
        "best_streak": db.get_int(BEST_STREAK_KEY),
    }
