"""Dictionary gate and an in-memory word list.

The engine never loads words itself: it is handed a predicate and a
"ready" flag. :class:`Dictionary` is a convenient word list that
provides both, for the terminal front end and for tests.
"""

from __future__ import annotations

import logging
import os
from typing import Callable, Iterable

from tileplay.constants import BOARD_SIZE

log = logging.getLogger("tileplay")

WordPredicate = Callable[[str], bool]


class DictionaryGate:
    """A word predicate plus a readiness flag.

    While not ready every lookup is refused, so an incomplete word list
    can never let a bogus word through or reject a good one.
    """

    __slots__ = ("_is_valid_word", "ready")

    def __init__(self, is_valid_word: WordPredicate, ready: bool = True):
        self._is_valid_word = is_valid_word
        self.ready = ready

    def is_valid_word(self, word: str) -> bool:
        return self.ready and self._is_valid_word(word)

    def accepts(self, words: Iterable[str]) -> bool:
        """True if the gate is ready and every word is valid."""
        return self.ready and all(self._is_valid_word(w) for w in words)


_MINIMAL_WORDS = {
    "AA", "AB", "AD", "AE", "AG", "AH", "AI", "AL", "AM", "AN",
    "AR", "AS", "AT", "AW", "AX", "AY", "BA", "BE", "BI", "BO",
    "BY", "DA", "DE", "DO", "ED", "EF", "EH", "EL", "EM", "EN",
    "ER", "ES", "ET", "EW", "EX", "FA", "FE", "GO", "HA", "HE",
    "HI", "HM", "HO", "ID", "IF", "IN", "IS", "IT", "JO", "KA",
    "KI", "LA", "LI", "LO", "MA", "ME", "MI", "MM", "MO", "MU",
    "MY", "NA", "NE", "NO", "NU", "OD", "OE", "OF", "OH", "OI",
    "OK", "OM", "ON", "OP", "OR", "OS", "OU", "OW", "OX", "OY",
    "PA", "PE", "PI", "PO", "QI", "RE", "SH", "SI", "SO", "TA",
    "TI", "TO", "UH", "UM", "UN", "UP", "US", "UT", "WE", "WO",
    "XI", "XU", "YA", "YE", "YO", "ZA",
    "THE", "AND", "FOR", "ARE", "BUT", "NOT", "YOU", "ALL", "CAN",
    "HER", "WAS", "ONE", "OUR", "OUT", "DAY", "HAD", "HAS", "HIS",
    "CAT", "CATS", "DOG", "RUN", "SET", "TOP", "RED", "SUN", "ART",
    "EAR", "TEA", "AGE", "OAR", "RAT", "MAP", "TEN", "EAT", "ATE",
    "GAME", "PLAY", "WORD", "QUIZ", "STAR", "TEAM", "TILE", "BEST",
    "MOVE", "RATE", "TEAR", "STARE", "TEARS", "RATES", "GAMES",
    "PLAYS", "WORDS", "STARS", "TEAMS", "TILES", "MOVES",
}


class Dictionary(DictionaryGate):
    """Uppercase word set usable as a :class:`DictionaryGate`."""

    def __init__(self, words: Iterable[str] = (), ready: bool = True):
        self.words: set[str] = {
            w.strip().upper() for w in words
            if 2 <= len(w.strip()) <= BOARD_SIZE and w.strip().isalpha()
        }
        super().__init__(self.words.__contains__, ready)

    @classmethod
    def from_file(cls, path: str) -> Dictionary:
        """One word per line; raises if *path* does not exist."""
        with open(path, "r", encoding="utf-8") as f:
            d = cls(f)
        log.info("Loaded %s words from %s", f"{len(d.words):,}", path)
        return d

    @classmethod
    def load(cls, path: str | None = None) -> Dictionary:
        """Word list from *path* or a few default names, else a minimal list."""
        search_paths = [path] if path else []
        search_paths.extend(["dictionary.txt", "twl06.txt", "sowpods.txt", "words.txt"])
        for candidate in search_paths:
            if os.path.exists(candidate):
                d = cls.from_file(candidate)
                if d.words:
                    return d
        log.warning("No dictionary file found -- using built-in minimal word list.")
        return cls.minimal()

    @classmethod
    def minimal(cls) -> Dictionary:
        return cls(_MINIMAL_WORDS)

    def is_valid_word(self, word: str) -> bool:
        return self.ready and word.upper() in self.words

    def accepts(self, words: Iterable[str]) -> bool:
        return self.ready and all(w.upper() in self.words for w in words)

    def __contains__(self, word: str) -> bool:
        return self.is_valid_word(word)

    def __len__(self) -> int:
        return len(self.words)
