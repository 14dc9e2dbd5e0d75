"""
Card catalog, shuffling and dealing.

The Deck is an immutable catalog of phrase cards and prompt templates.
Every game draws from its own shuffled copy, so the catalog itself is
shared safely between lobbies.
"""

import logging
import random
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from utils.constants import CARDS, PROMPTS
from .models import PromptTemplate

logger = logging.getLogger(__name__)

PromptSpec = Union[PromptTemplate, Tuple[str, int]]


class InsufficientCards(ValueError):
    """Raised when a draw asks for more cards than remain."""

    def __init__(self, requested: int, available: int):
        self.requested = requested
        self.available = available
        super().__init__(f"Cannot draw {requested} cards, only {available} left")


class Deck:
    """
    Immutable catalog of phrase cards and prompt templates.

    Card texts are de-duplicated on construction: a card has no identity
    beyond its text, so one hand can never hold the same text twice.
    """

    def __init__(self,
                 cards: Optional[Iterable[str]] = None,
                 prompts: Optional[Iterable[PromptSpec]] = None):
        """
        Build the catalog.

        Args:
            cards: Phrase card texts (defaults to the built-in catalog)
            prompts: PromptTemplates or (text, blanks) pairs

        Raises:
            ValueError: If a catalog is empty or a prompt's blanks disagree
                with its placeholders
        """
        raw_cards = CARDS if cards is None else cards
        raw_prompts = PROMPTS if prompts is None else prompts

        self._cards: Tuple[str, ...] = tuple(
            dict.fromkeys(card.strip() for card in raw_cards if card and card.strip())
        )
        self._prompts: Tuple[PromptTemplate, ...] = tuple(
            p if isinstance(p, PromptTemplate) else PromptTemplate(text=p[0], blanks=p[1])
            for p in raw_prompts
        )

        if not self._cards:
            raise ValueError("Deck needs at least one card")
        if not self._prompts:
            raise ValueError("Deck needs at least one prompt")

        invalid = [p.text for p in self._prompts if not p.is_valid]
        if invalid:
            raise ValueError(f"Prompts with mismatched blanks: {invalid}")

        logger.debug(f"Deck built with {len(self._cards)} cards and {len(self._prompts)} prompts")

    @property
    def cards(self) -> Tuple[str, ...]:
        return self._cards

    @property
    def prompts(self) -> Tuple[PromptTemplate, ...]:
        return self._prompts

    def shuffled_cards(self, rng: Optional[random.Random] = None) -> List[str]:
        """
        Return every card exactly once in a uniformly random order.

        Args:
            rng: Optional random source for deterministic shuffles

        Returns:
            Shuffled copy of the card catalog
        """
        cards = list(self._cards)
        (rng or random).shuffle(cards)
        return cards

    def shuffled_prompts(self, rng: Optional[random.Random] = None) -> List[PromptTemplate]:
        """Return every prompt exactly once in a uniformly random order."""
        prompts = list(self._prompts)
        (rng or random).shuffle(prompts)
        return prompts

    @staticmethod
    def draw(deck: Sequence[str], count: int) -> Tuple[List[str], List[str]]:
        """
        Take the first `count` cards off a draw pile.

        Args:
            deck: Current draw pile
            count: Number of cards to draw

        Returns:
            tuple: (drawn_cards, remaining_deck)

        Raises:
            InsufficientCards: If fewer than `count` cards remain
        """
        if count < 0:
            raise ValueError("Cannot draw a negative number of cards")
        if count > len(deck):
            raise InsufficientCards(count, len(deck))
        return list(deck[:count]), list(deck[count:])

    def validate_capacity(self, max_players: int, hand_size: int) -> None:
        """
        Check the catalog can deal a full hand to a full lobby.

        Raises:
            InsufficientCards: If the catalog is too small
        """
        needed = max_players * hand_size
        if needed > len(self._cards):
            raise InsufficientCards(needed, len(self._cards))
