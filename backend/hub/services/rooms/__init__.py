"""Room domain services: code allocation and the room registry.

This package holds the lobby state machine shared by every mini-game. It
talks to clients only through a transport object, keeping Socket.IO
details out of room bookkeeping.
"""

from .codes import RoomCodeAllocator
from .errors import RoomCodeSpaceExhausted, RoomError, RoomNotFound
from .registry import DisconnectOutcome, RoomRegistry

__all__ = [
    'DisconnectOutcome',
    'RoomCodeAllocator',
    'RoomCodeSpaceExhausted',
    'RoomError',
    'RoomNotFound',
    'RoomRegistry',
]
