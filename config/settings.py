import os
from dotenv import load_dotenv

# Only load the .env file if we're not on Render (i.e., we are in a local environment)
if os.environ.get("RENDER") != "true":
    load_dotenv()


def _env_bool(name: str, default: str = 'false') -> bool:
    return os.getenv(name, default).strip().lower() in ('1', 'true', 'yes', 'on')


# Flask Configuration
SECRET_KEY = os.getenv('SECRET_KEY', 'a_very_secret_key_that_should_be_changed')
CORS_ORIGINS = os.getenv('CORS_ORIGINS', '*')
APP_ENV = os.getenv('APP_ENV', 'development')

# Socket.IO Configuration
SOCKETIO_ASYNC_MODE = os.getenv('SOCKETIO_ASYNC_MODE', 'eventlet')

# Logging
LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()

# Game Configuration
MAX_ROUNDS = int(os.getenv('MAX_ROUNDS', 10))
HAND_SIZE = int(os.getenv('HAND_SIZE', 8))
MAX_LOBBY_PLAYERS = int(os.getenv('MAX_LOBBY_PLAYERS', 8))
REFILL_HANDS = _env_bool('REFILL_HANDS')

# Phase time-boxes in seconds (0 disables the timer for that phase)
SUBMIT_TIMEOUT_SEC = int(os.getenv('SUBMIT_TIMEOUT_SEC', 0))
JUDGE_TIMEOUT_SEC = int(os.getenv('JUDGE_TIMEOUT_SEC', 0))
RESULTS_TIMEOUT_SEC = int(os.getenv('RESULTS_TIMEOUT_SEC', 0))

# Lobby reaper
LOBBY_CLEANUP_INTERVAL_SEC = int(os.getenv('LOBBY_CLEANUP_INTERVAL_SEC', 300))
LOBBY_INACTIVE_MINUTES = int(os.getenv('LOBBY_INACTIVE_MINUTES', 5))

# Server Configuration
HOST = os.getenv('HOST', '0.0.0.0')
PORT = int(os.getenv('PORT', 3000))
DEBUG = APP_ENV == 'development' and os.environ.get('RENDER', '') != 'true'


def as_dict() -> dict:
    """Snapshot of every setting, keyed by its env var name."""
    return {
        'SECRET_KEY': SECRET_KEY,
        'CORS_ORIGINS': CORS_ORIGINS,
        'APP_ENV': APP_ENV,
        'SOCKETIO_ASYNC_MODE': SOCKETIO_ASYNC_MODE,
        'LOG_LEVEL': LOG_LEVEL,
        'MAX_ROUNDS': MAX_ROUNDS,
        'HAND_SIZE': HAND_SIZE,
        'MAX_LOBBY_PLAYERS': MAX_LOBBY_PLAYERS,
        'REFILL_HANDS': REFILL_HANDS,
        'SUBMIT_TIMEOUT_SEC': SUBMIT_TIMEOUT_SEC,
        'JUDGE_TIMEOUT_SEC': JUDGE_TIMEOUT_SEC,
        'RESULTS_TIMEOUT_SEC': RESULTS_TIMEOUT_SEC,
        'LOBBY_CLEANUP_INTERVAL_SEC': LOBBY_CLEANUP_INTERVAL_SEC,
        'LOBBY_INACTIVE_MINUTES': LOBBY_INACTIVE_MINUTES,
        'HOST': HOST,
        'PORT': PORT,
        'DEBUG': DEBUG,
    }
