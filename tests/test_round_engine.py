import random
import pytest

from game import Deck, GamePhase, GamePlayer, InsufficientCards, RoundEngine


def play(engine, player_id, index=0):
    engine.select_card(player_id, index)
    return engine.submit_cards(player_id)


def finish_playing(engine, order=None):
    """Every non-judge submits its first card, in the given order."""
    players = order or [p.player_id for p in engine.non_judge_players()]
    for player_id in players:
        play(engine, player_id)


def test_initial_state(make_engine):
    engine = make_engine(3)
    assert engine.current_round == 1
    assert engine.current_judge_index == 0
    assert engine.judge.player_id == "p0"
    assert engine.phase == GamePhase.PLAYING
    assert engine.current_prompt == engine.prompts[0]
    assert engine.submissions == []
    assert engine.pending_selections == {}
    assert all(len(hand) == 8 for hand in engine.hands.values())


def test_deck_integrity(make_engine):
    engine = make_engine(4)
    dealt = [card for hand in engine.hands.values() for card in hand]
    assert len(dealt) == len(set(dealt))
    assert not set(dealt) & set(engine.deck)
    assert len(dealt) + len(engine.deck) == 60


def test_too_many_players_for_catalog():
    small = Deck(cards=[f"c{i}" for i in range(10)], prompts=[("{0}", 1)])
    players = [GamePlayer(player_id=f"p{i}", name=f"P{i}") for i in range(2)]
    with pytest.raises(InsufficientCards):
        RoundEngine("lobby", players, small, hand_size=8)


def test_duplicate_player_ids_rejected(deck):
    players = [GamePlayer("p0", "A"), GamePlayer("p0", "B")]
    with pytest.raises(ValueError):
        RoundEngine("lobby", players, deck)


def test_scenario_a_full_round(make_engine):
    engine = make_engine(3, max_rounds=2)
    assert engine.judge.player_id == "p0"

    play(engine, "p1")
    assert engine.phase == GamePhase.PLAYING
    play(engine, "p2")
    assert engine.phase == GamePhase.JUDGING

    winner_id = engine.submissions[0].player_id
    changed, _ = engine.select_winner("p0", 0)
    assert changed
    assert engine.get_player(winner_id).score == 1
    assert engine.phase == GamePhase.RESULTS
    assert engine.round_winner['playerId'] == winner_id
    assert engine.winning_combination['cards'] == engine.submissions[0].cards

    changed, _ = engine.next_round("p0")
    assert changed
    assert engine.current_round == 2
    assert engine.judge.player_id == "p1"
    assert engine.phase == GamePhase.PLAYING
    assert engine.submissions == []
    assert engine.round_winner is None
    assert engine.winning_combination is None


def test_scenario_b_toggle_off(make_engine):
    engine = make_engine(3)
    engine.select_card("p1", 2)
    assert engine.pending_selections["p1"] == [2]
    engine.select_card("p1", 2)
    assert engine.pending_selections["p1"] == []


def test_scenario_c_oldest_selection_replaced(make_engine, two_blank_deck):
    engine = make_engine(3, deck_=two_blank_deck)
    assert engine.current_prompt.blanks == 2
    engine.select_card("p1", 0)
    engine.select_card("p1", 1)
    assert engine.pending_selections["p1"] == [0, 1]
    engine.select_card("p1", 3)
    assert engine.pending_selections["p1"] == [1, 3]


def test_selection_capacity_stays_at_blanks(make_engine):
    engine = make_engine(3)
    for index in range(5):
        engine.select_card("p1", index)
        assert len(engine.pending_selections["p1"]) == 1
    assert engine.pending_selections["p1"] == [4]


def test_scenario_e_next_round_by_non_judge(make_engine):
    engine = make_engine(3)
    finish_playing(engine)
    engine.select_winner("p0", 0)
    before = engine.to_public_state()

    changed, _ = engine.next_round("p1")
    assert not changed
    assert engine.to_public_state() == before


def test_judge_cannot_select_or_submit(make_engine):
    engine = make_engine(3)
    assert engine.select_card("p0", 0) == (False, "Judge does not select cards")
    changed, _ = engine.submit_cards("p0")
    assert not changed
    assert "p0" not in engine.pending_selections
    assert engine.submissions == []


@pytest.mark.parametrize("index", [-1, 8, 100, True, "1", 1.0])
def test_out_of_range_or_non_integer_index_is_ignored(make_engine, index):
    engine = make_engine(3)
    changed, _ = engine.select_card("p1", index)
    assert not changed
    assert engine.pending_selections.get("p1", []) == []


def test_submit_with_nothing_selected_is_ignored(make_engine):
    engine = make_engine(3)
    changed, _ = engine.submit_cards("p1")
    assert not changed
    assert engine.submissions == []


def test_submission_uniqueness(make_engine):
    engine = make_engine(4)
    play(engine, "p1")
    changed, _ = play(engine, "p1")
    assert not changed
    assert [s.player_id for s in engine.submissions] == ["p1"]
    assert engine.phase == GamePhase.PLAYING


def test_select_after_own_submission_is_ignored(make_engine):
    engine = make_engine(4)
    play(engine, "p1")
    changed, _ = engine.select_card("p1", 0)
    assert not changed
    assert engine.pending_selections["p1"] == []


def test_submitted_cards_leave_the_hand(make_engine):
    engine = make_engine(3)
    card = engine.hands["p1"][3]
    play(engine, "p1", 3)
    assert engine.submissions[0].cards == [card]
    assert card not in engine.hands["p1"]
    assert len(engine.hands["p1"]) == 7


def test_multi_card_submission_keeps_selection_order(make_engine, two_blank_deck):
    engine = make_engine(3, deck_=two_blank_deck)
    hand = list(engine.hands["p1"])
    engine.select_card("p1", 5)
    engine.select_card("p1", 2)
    engine.submit_cards("p1")
    assert engine.submissions[0].cards == [hand[5], hand[2]]
    assert engine.hands["p1"] == [c for i, c in enumerate(hand) if i not in (2, 5)]


@pytest.mark.parametrize("order", [
    ["p1", "p2", "p3"],
    ["p3", "p2", "p1"],
    ["p2", "p3", "p1"],
])
def test_judging_starts_once_all_non_judges_submit(deck, order):
    players = [GamePlayer(player_id=f"p{i}", name=f"Player {i}") for i in range(4)]
    engine = RoundEngine("lobby", players, deck, rng=random.Random(5))

    for player_id in order[:-1]:
        play(engine, player_id)
        assert engine.phase == GamePhase.PLAYING
    play(engine, order[-1])

    assert engine.phase == GamePhase.JUDGING
    assert sorted(s.player_id for s in engine.submissions) == ["p1", "p2", "p3"]


def test_select_winner_guards(make_engine):
    engine = make_engine(3)
    assert not engine.select_winner("p0", 0)[0]
    finish_playing(engine)
    assert not engine.select_winner("p1", 0)[0]
    assert not engine.select_winner("p0", 5)[0]
    assert not engine.select_winner("p0", -1)[0]
    assert engine.phase == GamePhase.JUDGING
    assert all(p.score == 0 for p in engine.players)


def test_rotation_is_positional(make_engine):
    engine = make_engine(3, max_rounds=7)
    seen = []
    for _ in range(6):
        seen.append(engine.current_judge_index)
        finish_playing(engine)
        engine.select_winner(engine.judge.player_id, len(engine.submissions) - 1)
        engine.next_round(engine.judge.player_id)
    assert seen == [0, 1, 2, 0, 1, 2]
    assert engine.current_judge_index == 0


def test_termination(make_engine):
    engine = make_engine(2, max_rounds=1)
    finish_playing(engine)
    engine.select_winner("p0", 0)
    changed, _ = engine.next_round("p0")
    assert changed
    assert engine.phase == GamePhase.GAME_OVER
    assert engine.is_game_over

    assert not engine.next_round("p0")[0]
    assert not engine.select_card("p1", 0)[0]
    assert engine.phase == GamePhase.GAME_OVER
    assert engine.current_round == 1


def test_prompts_wrap_around(make_engine):
    engine = make_engine(2, max_rounds=5)
    prompts = []
    for _ in range(4):
        prompts.append(engine.current_prompt)
        finish_playing(engine)
        engine.select_winner(engine.judge.player_id, 0)
        engine.next_round(engine.judge.player_id)
    prompts.append(engine.current_prompt)
    assert prompts[:3] == engine.prompts
    assert prompts[3] == engine.prompts[0]


def test_next_round_clears_pending_selections(make_engine):
    engine = make_engine(3)
    play(engine, "p1")
    play(engine, "p2")
    engine.select_winner("p0", 0)
    engine.next_round("p0")
    assert engine.pending_selections == {}


def test_hands_deplete_by_default(make_engine):
    engine = make_engine(2)
    finish_playing(engine)
    engine.select_winner("p0", 0)
    engine.next_round("p0")
    assert len(engine.hands["p1"]) == 7


def test_refill_tops_hands_up(make_engine):
    engine = make_engine(2, refill_hands=True)
    deck_before = len(engine.deck)
    finish_playing(engine)
    engine.select_winner("p0", 0)
    engine.next_round("p0")
    assert len(engine.hands["p1"]) == 8
    assert len(engine.deck) == deck_before - 1


def test_waiting_for(make_engine):
    engine = make_engine(3)
    assert [p.player_id for p in engine.waiting_for()] == ["p1", "p2"]
    play(engine, "p1")
    assert [p.player_id for p in engine.waiting_for()] == ["p2"]
    play(engine, "p2")
    assert [p.player_id for p in engine.waiting_for()] == ["p0"]


def test_public_state_shows_only_viewer_hand(make_engine):
    engine = make_engine(3)
    state = engine.to_public_state(viewer_id="p1")
    assert list(state['hands']) == ["p1"]
    assert state['hands']["p1"] == engine.hands["p1"]
    assert state['handCounts'] == {"p0": 8, "p1": 8, "p2": 8}
    assert state['currentJudge'] == "Player 0"
    assert state['phase'] == "playing"
    assert state['waitingFor'] == ["Player 1", "Player 2"]
    assert state['playerCount'] == 3

    other = engine.to_public_state(viewer_id="p2")
    for key in state:
        if key != 'hands':
            assert state[key] == other[key]


def test_submitted_combinations_only_while_judging(make_engine):
    engine = make_engine(3)
    play(engine, "p1")
    assert engine.to_public_state()['submittedCombinations'] == []
    play(engine, "p2")
    state = engine.to_public_state()
    assert state['submittedCombinations'] == state['submissions']
    assert len(state['submissions']) == 2


def test_disconnected_player_keeps_seat(make_engine):
    engine = make_engine(3)
    assert engine.set_connected("p2", False)
    assert len(engine.players) == 3
    assert engine.get_player("p2").connected is False
    assert "Player 2" in engine.to_public_state()['waitingFor']
    assert not engine.set_connected("nobody", False)
