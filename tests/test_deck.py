import random
import pytest

from game import Deck, InsufficientCards, PromptTemplate
from utils.constants import CARDS, PROMPTS, GAME_CONFIG


def test_default_catalog_is_valid_and_deduplicated():
    deck = Deck()
    assert len(deck.cards) == len(set(deck.cards))
    assert set(deck.cards) == {c.strip() for c in CARDS}
    assert len(deck.prompts) == len(PROMPTS)
    assert all(p.is_valid for p in deck.prompts)


def test_default_catalog_can_deal_a_full_lobby():
    Deck().validate_capacity(GAME_CONFIG['MAX_LOBBY_CAPACITY'], GAME_CONFIG['HAND_SIZE'])


def test_duplicate_cards_are_dropped():
    deck = Deck(cards=["a", "b", "a", " b ", "c"], prompts=[("{0}", 1)])
    assert deck.cards == ("a", "b", "c")


def test_shuffled_cards_is_a_permutation():
    deck = Deck(cards=[f"c{i}" for i in range(30)], prompts=[("{0}", 1)])
    shuffled = deck.shuffled_cards(random.Random(3))
    assert sorted(shuffled) == sorted(deck.cards)
    # The catalog itself is untouched
    assert deck.cards == tuple(f"c{i}" for i in range(30))


def test_shuffles_are_reproducible_with_a_seed():
    deck = Deck()
    assert deck.shuffled_prompts(random.Random(9)) == deck.shuffled_prompts(random.Random(9))


def test_draw_takes_from_the_front():
    drawn, remaining = Deck.draw(["a", "b", "c", "d"], 3)
    assert drawn == ["a", "b", "c"]
    assert remaining == ["d"]


def test_draw_zero_and_exact():
    assert Deck.draw(["a"], 0) == ([], ["a"])
    assert Deck.draw(["a", "b"], 2) == (["a", "b"], [])


def test_draw_more_than_available_fails():
    with pytest.raises(InsufficientCards) as excinfo:
        Deck.draw(["a", "b"], 3)
    assert excinfo.value.requested == 3
    assert excinfo.value.available == 2


def test_draw_negative_fails():
    with pytest.raises(ValueError):
        Deck.draw(["a"], -1)


def test_validate_capacity_rejects_small_catalog():
    deck = Deck(cards=[f"c{i}" for i in range(15)], prompts=[("{0}", 1)])
    with pytest.raises(InsufficientCards):
        deck.validate_capacity(2, 8)


@pytest.mark.parametrize("prompt", [
    ("No placeholders here", 1),
    ("Only {0}", 2),
    ("Skips {0} and {2}", 2),
    ("Too many {0} {1} {2} {3}", 4),
])
def test_mismatched_prompts_are_rejected(prompt):
    with pytest.raises(ValueError):
        Deck(cards=["a"], prompts=[prompt])


def test_empty_catalogs_are_rejected():
    with pytest.raises(ValueError):
        Deck(cards=[], prompts=[("{0}", 1)])
    with pytest.raises(ValueError):
        Deck(cards=["a"], prompts=[])


def test_prompt_fill():
    prompt = PromptTemplate("Both {0} and {1}.", 2)
    assert prompt.fill(["x", "y"]) == "Both x and y."
    assert prompt.fill(["x"]) == "Both x and _____."
