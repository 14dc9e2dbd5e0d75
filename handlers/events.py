"""
Socket.IO event models and validation.

Every inbound event is validated into a model tagged by its event name
before it reaches the managers. Events whose payload is a bare value
(a name, an id, an index) are wrapped into that model's single field.
"""

from enum import Enum
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, Field, StrictInt, StrictStr, TypeAdapter


class ServerEvent(str, Enum):
    """Outbound event names."""
    CONNECTED = "connected"
    NAME_SET = "name-set"
    LOBBY_LIST = "lobby-list"
    LOBBY_CREATED = "lobby-created"
    LOBBY_JOINED = "lobby-joined"
    LOBBY_UPDATED = "lobby-updated"
    LOBBY_LEFT = "lobby-left"
    PLAYER_DISCONNECTED = "player-disconnected"
    GAME_STARTED = "game-started"
    GAME_UPDATED = "game-updated"
    GAME_ENDED = "game-ended"
    SOUNDBOARD_PLAYED = "soundboard-played"
    ERROR = "error"


# Inbound event models
class SetNameEvent(BaseModel):
    event: Literal['set-name'] = 'set-name'
    name: StrictStr


class GetLobbiesEvent(BaseModel):
    event: Literal['get-lobbies'] = 'get-lobbies'


class CreateLobbyEvent(BaseModel):
    """Create lobby event; maxRounds is optional."""
    event: Literal['create-lobby'] = 'create-lobby'
    name: StrictStr
    max_players: int = Field(..., alias='maxPlayers')
    max_rounds: Optional[int] = Field(None, alias='maxRounds')


class JoinLobbyEvent(BaseModel):
    event: Literal['join-lobby'] = 'join-lobby'
    lobby_id: StrictStr = Field(..., alias='lobbyId', min_length=1)


class LeaveLobbyEvent(BaseModel):
    event: Literal['leave-lobby'] = 'leave-lobby'


class StartGameEvent(BaseModel):
    event: Literal['start-game'] = 'start-game'


class SelectCardEvent(BaseModel):
    """Toggle a hand card; range is checked by the engine."""
    event: Literal['select-card'] = 'select-card'
    hand_index: StrictInt = Field(..., alias='handIndex')


class SubmitCardsEvent(BaseModel):
    event: Literal['submit-cards'] = 'submit-cards'


class SelectWinnerEvent(BaseModel):
    event: Literal['select-winner'] = 'select-winner'
    submission_index: StrictInt = Field(..., alias='submissionIndex')


class NextRoundEvent(BaseModel):
    event: Literal['next-round'] = 'next-round'


class PlaySoundboardEvent(BaseModel):
    event: Literal['play-soundboard'] = 'play-soundboard'
    sound_id: StrictStr = Field(..., alias='soundId', min_length=1, max_length=100)


ClientEvent = Annotated[
    Union[
        SetNameEvent,
        GetLobbiesEvent,
        CreateLobbyEvent,
        JoinLobbyEvent,
        LeaveLobbyEvent,
        StartGameEvent,
        SelectCardEvent,
        SubmitCardsEvent,
        SelectWinnerEvent,
        NextRoundEvent,
        PlaySoundboardEvent,
    ],
    Field(discriminator='event')
]

_client_event_adapter = TypeAdapter(ClientEvent)

# Field a bare (non-object) payload is wrapped into, per event
SCALAR_PAYLOAD_FIELDS = {
    'set-name': 'name',
    'join-lobby': 'lobbyId',
    'select-card': 'handIndex',
    'select-winner': 'submissionIndex',
    'play-soundboard': 'soundId',
}


def parse_client_event(event_name: str, payload: Any = None) -> BaseModel:
    """
    Validate an inbound event.

    Args:
        event_name: Socket.IO event name
        payload: Raw payload as received

    Returns:
        The validated event model

    Raises:
        pydantic.ValidationError: If the payload does not match the event
    """
    if isinstance(payload, dict):
        data = dict(payload)
    elif payload is None:
        data = {}
    elif event_name in SCALAR_PAYLOAD_FIELDS:
        data = {SCALAR_PAYLOAD_FIELDS[event_name]: payload}
    else:
        data = {}

    data['event'] = event_name
    return _client_event_adapter.validate_python(data)
