"""
Trump Against Humanity - A Fill-in-the-Blank Party Game Backend

Flask-SocketIO server for real-time multiplayer rounds: players fill a
prompt's blanks with phrase cards and a rotating judge picks the winner.
App.py is purely server setup and handler registration.
"""

import logging
import random
from typing import Any, Dict, Optional
from flask import Flask
from flask_socketio import SocketIO
from flask_cors import CORS
from werkzeug.middleware.proxy_fix import ProxyFix

from config import settings
from lobby import LobbyManager, PlayerManager, ConnectionManager
from game import Deck, GameManager, PhaseTimer
from handlers import register_socket_handlers, register_api_handlers

logger = logging.getLogger(__name__)


def configure_logging(level: str = settings.LOG_LEVEL) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def start_lobby_reaper(socketio, lobby_manager, interval: int, inactive_minutes: int):
    """Periodically delete empty waiting lobbies that have gone stale."""

    def _reap():
        while True:
            socketio.sleep(interval)
            try:
                with lobby_manager.lock:
                    lobby_manager.cleanup_inactive_lobbies(inactive_minutes=inactive_minutes)
            except Exception as e:
                logger.error(f"Error cleaning up lobbies: {e}")

    return socketio.start_background_task(_reap)


def create_app(overrides: Optional[Dict[str, Any]] = None):
    """
    Application factory that creates and configures the Flask app.

    Args:
        overrides: Settings to use instead of the environment, keyed by env
            var name. RANDOM_SEED seeds every shuffle and random pick.

    Returns:
        tuple: (app, socketio)

    Raises:
        ValueError: If the card catalog cannot deal a full lobby
    """
    config = settings.as_dict()
    config.update(overrides or {})

    # Flask configuration
    app = Flask(__name__)
    app.config['SECRET_KEY'] = config['SECRET_KEY']
    app.config['APP_ENV'] = config['APP_ENV']

    # CORS configuration for the browser client
    cors_origins = config['CORS_ORIGINS'].split(',')
    CORS(app, origins=cors_origins)

    # ProxyFix for deployment behind reverse proxy
    app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1)

    # SocketIO configuration
    socketio = SocketIO(
        app,
        cors_allowed_origins='*' if cors_origins == ['*'] else cors_origins,
        async_mode=config['SOCKETIO_ASYNC_MODE'],
        ping_timeout=60,
        ping_interval=25
    )

    # Card catalog, checked once before any lobby can start a game
    deck = Deck()
    deck.validate_capacity(config['MAX_LOBBY_PLAYERS'], config['HAND_SIZE'])
    logger.info(f"Loaded {len(deck.cards)} cards and {len(deck.prompts)} prompts")

    seed = config.get('RANDOM_SEED')
    rng = random.Random(seed) if seed is not None else random.Random()

    # Lobby management system
    lobby_manager = LobbyManager(
        connection_manager=ConnectionManager(),
        player_manager=PlayerManager(),
        max_lobby_players=config['MAX_LOBBY_PLAYERS'],
        default_max_rounds=config['MAX_ROUNDS']
    )

    # Game management system
    game_manager = GameManager(
        lobby_manager,
        deck=deck,
        hand_size=config['HAND_SIZE'],
        refill_hands=config['REFILL_HANDS'],
        rng=rng
    )

    phase_timer = PhaseTimer(
        socketio, lobby_manager, game_manager,
        submit_timeout=config['SUBMIT_TIMEOUT_SEC'],
        judge_timeout=config['JUDGE_TIMEOUT_SEC'],
        results_timeout=config['RESULTS_TIMEOUT_SEC']
    )

    # Register handlers (pure routing layer)
    logger.info("Registering handlers...")
    register_socket_handlers(socketio, lobby_manager, game_manager,
                             phase_timer if phase_timer.enabled else None)
    register_api_handlers(app, lobby_manager, environment=config['APP_ENV'])

    if config['LOBBY_CLEANUP_INTERVAL_SEC'] > 0:
        start_lobby_reaper(socketio, lobby_manager,
                           config['LOBBY_CLEANUP_INTERVAL_SEC'],
                           config['LOBBY_INACTIVE_MINUTES'])

    logger.info("Application initialization complete")
    return app, socketio


def main():
    """Main entry point for development server."""
    configure_logging()
    app, socketio = create_app()

    logger.info(f"Starting Trump Against Humanity server on port {settings.PORT}")
    logger.info(f"Environment: {settings.APP_ENV}")
    logger.info(f"CORS origins: {settings.CORS_ORIGINS}")

    socketio.run(app, debug=settings.DEBUG, host=settings.HOST, port=settings.PORT)


if __name__ == '__main__':
    main()
