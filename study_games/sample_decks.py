"""Built-in sample decks offered to new users."""
from __future__ import annotations

from study_games.models import Deck, Flashcard

_SAMPLES: list[tuple[str, str, list[tuple[str, str]]]] = [
    (
        "Canadian Provinces & Capitals",
        "Geography",
        [
            ("Ontario", "Toronto"),
            ("Quebec", "Quebec City"),
            ("British Columbia", "Victoria"),
            ("Alberta", "Edmonton"),
            ("Manitoba", "Winnipeg"),
            ("Saskatchewan", "Regina"),
            ("Nova Scotia", "Halifax"),
            ("New Brunswick", "Fredericton"),
            ("Prince Edward Island", "Charlottetown"),
            ("Newfoundland and Labrador", "St. John's"),
            ("Northwest Territories", "Yellowknife"),
            ("Yukon", "Whitehorse"),
            ("Nunavut", "Iqaluit"),
        ],
    ),
    (
        "French Basics",
        "French",
        [
            ("Hello", "Bonjour"),
            ("Goodbye", "Au revoir"),
            ("Thank you", "Merci"),
            ("Please", "S'il vous plait"),
            ("Yes", "Oui"),
            ("No", "Non"),
            ("Good morning", "Bon matin"),
            ("Good night", "Bonne nuit"),
            ("How are you?", "Comment allez-vous?"),
            ("My name is...", "Je m'appelle..."),
        ],
    ),
    (
        "Math Formulas",
        "Math",
        [
            ("Area of a circle", "A = pi x r^2"),
            ("Circumference of a circle", "C = 2 x pi x r"),
            ("Pythagorean theorem", "a^2 + b^2 = c^2"),
            ("Quadratic formula", "x = (-b +/- sqrt(b^2 - 4ac)) / 2a"),
            ("Area of a triangle", "A = (1/2) x base x height"),
            ("Slope formula", "m = (y2 - y1) / (x2 - x1)"),
            ("Volume of a sphere", "V = (4/3) x pi x r^3"),
            ("Distance formula", "d = sqrt((x2-x1)^2 + (y2-y1)^2)"),
            ("Area of a rectangle", "A = length x width"),
            ("Volume of a cylinder", "V = pi x r^2 x h"),
        ],
    ),
]


def sample_decks() -> list[Deck]:
    """Fresh copies of the sample decks, each with new ids."""
    return [
        Deck(
            title=title,
            subject=subject,
            cards=[Flashcard(front=f, back=b) for f, b in cards],
        )
        for title, subject, cards in _SAMPLES
    ]
