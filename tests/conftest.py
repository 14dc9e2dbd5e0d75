import os
import sys
import random
import pytest

# Ensure the project root (containing the top-level packages) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
PROJECT_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from app import create_app
from game import Deck, GameManager, GamePlayer, RoundEngine
from lobby import LobbyManager


TEST_CARDS = [f"card {i}" for i in range(60)]
ONE_BLANK_PROMPTS = [("First {0}.", 1), ("Second {0}.", 1), ("Third {0}.", 1)]
TWO_BLANK_PROMPTS = [("Both {0} and {1}.", 2), ("Neither {0} nor {1}.", 2)]

TEST_SETTINGS = {
    'SOCKETIO_ASYNC_MODE': 'threading',
    'LOBBY_CLEANUP_INTERVAL_SEC': 0,
    'SUBMIT_TIMEOUT_SEC': 0,
    'JUDGE_TIMEOUT_SEC': 0,
    'RESULTS_TIMEOUT_SEC': 0,
    'MAX_ROUNDS': 10,
    'HAND_SIZE': 8,
    'MAX_LOBBY_PLAYERS': 8,
    'REFILL_HANDS': False,
    'RANDOM_SEED': 1234,
}


@pytest.fixture()
def rng():
    return random.Random(1234)


@pytest.fixture()
def deck():
    return Deck(cards=TEST_CARDS, prompts=ONE_BLANK_PROMPTS)


@pytest.fixture()
def two_blank_deck():
    return Deck(cards=TEST_CARDS, prompts=TWO_BLANK_PROMPTS)


@pytest.fixture()
def make_engine(deck, rng):
    """Build a RoundEngine for players p0..pN-1 (p0 is the first judge)."""
    def _make(player_count=3, deck_=None, **kwargs):
        players = [GamePlayer(player_id=f"p{i}", name=f"Player {i}") for i in range(player_count)]
        return RoundEngine("lobby-1", players, deck_ or deck, rng=rng, **kwargs)
    return _make


@pytest.fixture()
def lobby_manager():
    return LobbyManager(max_lobby_players=8, default_max_rounds=3)


@pytest.fixture()
def game_manager(lobby_manager, deck, rng):
    return GameManager(lobby_manager, deck=deck, hand_size=8, rng=rng)


@pytest.fixture()
def flask_app():
    app, socketio = create_app(dict(TEST_SETTINGS))
    app.config['TESTING'] = True
    yield app, socketio


@pytest.fixture()
def client(flask_app):
    app, _ = flask_app
    return app.test_client()


@pytest.fixture()
def connect(flask_app):
    """Open Socket.IO test clients; each one is a separate connection."""
    app, socketio = flask_app
    opened = []

    def _connect(name=None):
        sio_client = socketio.test_client(app, flask_test_client=app.test_client())
        sio_client.get_received()
        if name is not None:
            sio_client.emit('set-name', name)
            sio_client.get_received()
        opened.append(sio_client)
        return sio_client

    yield _connect

    for sio_client in opened:
        if sio_client.is_connected():
            sio_client.disconnect()
