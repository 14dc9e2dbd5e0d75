"""
Socket.IO Event Handlers for Trump Against Humanity.

Pure routing layer that delegates to the lobby and game managers.
Contains no business logic - only payload validation, event routing and
response formatting. Lobby and game payloads are built per recipient, so
they are sent to each member's own connection rather than to the room.
"""

import logging
from flask import request
from flask_socketio import emit, join_room, leave_room
from pydantic import ValidationError

from lobby.models import LobbyStatus
from utils.constants import ERROR_MESSAGES
from .events import ServerEvent, parse_client_event

logger = logging.getLogger(__name__)


def register_socket_handlers(socketio, lobby_manager, game_manager, phase_timer=None):
    """
    Register all Socket.IO event handlers.

    Args:
        socketio: SocketIO instance
        lobby_manager: Session directory; its lock serializes every handler
        game_manager: Game management instance
        phase_timer: Optional PhaseTimer for time-boxed phases
    """

    def parse(event_name, payload=None):
        try:
            return parse_client_event(event_name, payload)
        except ValidationError as e:
            logger.warning(f"Rejected {event_name} from {request.sid}: {e.error_count()} validation errors")
            emit(ServerEvent.ERROR.value, {'message': ERROR_MESSAGES['INVALID_PAYLOAD']})
            return None

    def broadcast_lobby(lobby):
        """Send each member the lobby summary with their own host flag."""
        for member in lobby.members:
            socketio.emit(ServerEvent.LOBBY_UPDATED.value, lobby.to_summary(member.player_id), to=member.sid)

    def broadcast_game(lobby, event):
        """Send each member the full game state with only their own hand."""
        for member in lobby.members:
            state = lobby.public_game_state(member.player_id)
            if state is not None:
                socketio.emit(event.value, state, to=member.sid)

    def broadcast_game_change(lobby):
        if lobby.status == LobbyStatus.FINISHED:
            logger.info(f"Game ended in lobby {lobby.name}")
            broadcast_game(lobby, ServerEvent.GAME_ENDED)
            broadcast_lobby(lobby)
            return

        if phase_timer:
            phase_timer.schedule(lobby)
        broadcast_game(lobby, ServerEvent.GAME_UPDATED)

    if phase_timer:
        phase_timer.on_timeout = broadcast_game_change

    def notify_left(lobby, player_name, disconnected=False):
        """Tell the members left behind; nothing to do if the lobby is gone."""
        if not lobby_manager.is_active(lobby.lobby_id):
            return
        broadcast_lobby(lobby)
        if disconnected:
            socketio.emit(ServerEvent.PLAYER_DISCONNECTED.value, player_name, to=lobby.lobby_id)
        if lobby.round_engine:
            broadcast_game(lobby, ServerEvent.GAME_UPDATED)

    @socketio.on('connect')
    def handle_connect():
        """Handle client connection."""
        logger.info(f"Client connected: {request.sid}")
        emit(ServerEvent.CONNECTED.value, {'message': 'Connected to server successfully'})

    @socketio.on('disconnect')
    def handle_disconnect(reason=None):
        """Handle client disconnection."""
        logger.info(f"Client disconnected: {request.sid}")

        try:
            with lobby_manager.lock:
                player, lobby = lobby_manager.drop_connection(request.sid)
                if player and lobby:
                    notify_left(lobby, player.name, disconnected=True)

        except Exception as e:
            logger.error(f"Error handling disconnect: {e}")

    @socketio.on('set-name')
    def handle_set_name(data=None):
        """Register a display name for this connection."""
        event = parse('set-name', data)
        if event is None:
            return

        try:
            with lobby_manager.lock:
                success, message, player = lobby_manager.register_player(request.sid, event.name)

            if success:
                emit(ServerEvent.NAME_SET.value, {'playerId': player.player_id, 'name': player.name})
            else:
                emit(ServerEvent.ERROR.value, {'message': message})

        except Exception as e:
            logger.error(f"Error setting name: {e}")
            emit(ServerEvent.ERROR.value, {'message': 'Failed to set name'})

    @socketio.on('get-lobbies')
    def handle_get_lobbies(data=None):
        """Send the requester every lobby that is accepting players."""
        try:
            with lobby_manager.lock:
                lobbies = lobby_manager.list_waiting_lobbies(request.sid)
            emit(ServerEvent.LOBBY_LIST.value, lobbies)

        except Exception as e:
            logger.error(f"Error listing lobbies: {e}")
            emit(ServerEvent.ERROR.value, {'message': 'Failed to get lobbies'})

    @socketio.on('create-lobby')
    def handle_create_lobby(data=None):
        """Handle lobby creation request."""
        event = parse('create-lobby', data)
        if event is None:
            return

        try:
            with lobby_manager.lock:
                success, message, lobby = lobby_manager.create_lobby(
                    request.sid,
                    name=event.name,
                    max_players=event.max_players,
                    max_rounds=event.max_rounds
                )
                if not success:
                    emit(ServerEvent.ERROR.value, {'message': message})
                    return

                join_room(lobby.lobby_id)
                summary = lobby.to_summary(lobby.host_id)

            emit(ServerEvent.LOBBY_CREATED.value, summary)
            emit(ServerEvent.LOBBY_JOINED.value, summary)

        except Exception as e:
            logger.error(f"Error creating lobby: {e}")
            emit(ServerEvent.ERROR.value, {'message': 'Failed to create lobby'})

    @socketio.on('join-lobby')
    def handle_join_lobby(data=None):
        """Handle player joining a lobby."""
        event = parse('join-lobby', data)
        if event is None:
            return

        try:
            with lobby_manager.lock:
                success, message, lobby = lobby_manager.join_lobby(request.sid, event.lobby_id)
                if not success:
                    emit(ServerEvent.ERROR.value, {'message': message})
                    return

                player = lobby_manager.get_player(request.sid)
                join_room(lobby.lobby_id)
                logger.info(f"{player.name} joined lobby {lobby.name}")

                emit(ServerEvent.LOBBY_JOINED.value, lobby.to_summary(player.player_id))
                broadcast_lobby(lobby)

        except Exception as e:
            logger.error(f"Error joining lobby: {e}")
            emit(ServerEvent.ERROR.value, {'message': 'Failed to join lobby'})

    @socketio.on('leave-lobby')
    def handle_leave_lobby(data=None):
        """Handle player leaving their lobby; confirmed even if not in one."""
        try:
            with lobby_manager.lock:
                player = lobby_manager.get_player(request.sid)
                _, _, lobby = lobby_manager.leave_lobby(request.sid)
                if lobby:
                    leave_room(lobby.lobby_id)
                    notify_left(lobby, player.name)

            emit(ServerEvent.LOBBY_LEFT.value)

        except Exception as e:
            logger.error(f"Error leaving lobby: {e}")
            emit(ServerEvent.ERROR.value, {'message': 'Failed to leave lobby'})

    @socketio.on('start-game')
    def handle_start_game(data=None):
        """Host starts the game for everyone in the lobby."""
        try:
            with lobby_manager.lock:
                success, message, lobby = game_manager.start_game(request.sid)
                if not success:
                    emit(ServerEvent.ERROR.value, {'message': message})
                    return

                if phase_timer:
                    phase_timer.schedule(lobby)
                broadcast_game(lobby, ServerEvent.GAME_STARTED)

        except Exception as e:
            logger.error(f"Error starting game: {e}")
            emit(ServerEvent.ERROR.value, {'message': 'Failed to start game'})

    def game_action(event_name, action, *args):
        """Run an in-game action; ignored actions send nothing back."""
        try:
            with lobby_manager.lock:
                changed, _, lobby = action(request.sid, *args)
                if changed and lobby:
                    broadcast_game_change(lobby)

        except Exception as e:
            logger.error(f"Error handling {event_name}: {e}")
            emit(ServerEvent.ERROR.value, {'message': f"Failed to {event_name.replace('-', ' ')}"})

    @socketio.on('select-card')
    def handle_select_card(data=None):
        event = parse('select-card', data)
        if event is not None:
            game_action('select-card', game_manager.select_card, event.hand_index)

    @socketio.on('submit-cards')
    def handle_submit_cards(data=None):
        game_action('submit-cards', game_manager.submit_cards)

    @socketio.on('select-winner')
    def handle_select_winner(data=None):
        event = parse('select-winner', data)
        if event is not None:
            game_action('select-winner', game_manager.select_winner, event.submission_index)

    @socketio.on('next-round')
    def handle_next_round(data=None):
        game_action('next-round', game_manager.next_round)

    @socketio.on('play-soundboard')
    def handle_play_soundboard(data=None):
        """Relay a soundboard clip to the player's lobby."""
        event = parse('play-soundboard', data)
        if event is None:
            return

        try:
            with lobby_manager.lock:
                player = lobby_manager.get_player(request.sid)
                lobby = lobby_manager.get_player_lobby(request.sid)
                if not player or not lobby:
                    return

            logger.debug(f"{player.name} played soundboard {event.sound_id}")
            socketio.emit(ServerEvent.SOUNDBOARD_PLAYED.value, {
                'playerId': player.player_id,
                'playerName': player.name,
                'soundId': event.sound_id
            }, to=lobby.lobby_id)

        except Exception as e:
            logger.error(f"Error playing soundboard: {e}")
            emit(ServerEvent.ERROR.value, {'message': 'Failed to play soundboard'})
