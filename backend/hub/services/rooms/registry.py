import logging
import threading
from enum import Enum
from typing import Dict, List, Optional

from hub.models import Player, Room, RoomStatus
from .codes import RoomCodeAllocator
from .errors import RoomNotFound

HOST_DISCONNECTED_REASON = 'The host has left the game. The room is closed.'


class DisconnectOutcome(str, Enum):
    HOST_LEFT = 'host_left'
    PLAYER_LEFT = 'player_left'
    UNKNOWN = 'unknown'


class RoomRegistry:
    """In-memory registry of live rooms keyed by room code.

    The registry owns every Room it holds. It never talks to Socket.IO
    directly; outbound events go through ``transport``, which must provide
    ``emit(sid, event, payload)``, ``join_channel(sid, channel)``,
    ``broadcast(channel, event, payload)`` and ``close_channel(channel)``.
    The room code doubles as the channel name.

    All mutations happen under one lock, and events are sent only after the
    mutation they describe has been committed.
    """

    def __init__(self, transport, allocator: Optional[RoomCodeAllocator] = None, logger=None):
        self.transport = transport
        self.allocator = allocator or RoomCodeAllocator()
        self.logger = logger or logging.getLogger(__name__)
        self._rooms: Dict[str, Room] = {}
        self._lock = threading.RLock()

    # ---- read API ----

    def __len__(self) -> int:
        with self._lock:
            return len(self._rooms)

    def __contains__(self, code) -> bool:
        with self._lock:
            return code in self._rooms

    def codes(self) -> List[str]:
        with self._lock:
            return list(self._rooms)

    def get_room(self, code: str) -> Room:
        with self._lock:
            room = self._rooms.get(code)
        if room is None:
            raise RoomNotFound(code)
        return room

    # ---- inbound events ----

    def create_room(self, sid: str, game_kind) -> Room:
        """Open a new room hosted by ``sid`` and confirm it to the host.

        Raises RoomCodeSpaceExhausted when every code is taken.
        """
        with self._lock:
            code = self.allocator.allocate(self._rooms)
            room = Room(code=code, host_sid=sid, game_kind=game_kind)
            self._rooms[code] = room
            self.transport.join_channel(sid, code)
            self.transport.emit(sid, 'roomCreated', {'roomCode': code, 'gameKind': game_kind})
        self.logger.info(f"[room-created] code={code} game={game_kind} host={sid}")
        return room

    def join_room(self, sid: str, code: str, player_name: str) -> Optional[Room]:
        """Admit ``sid`` to the room under ``code``.

        Returns the room, or None after telling the requester the code is
        unknown. A connection already in the room is not added twice; it just
        gets the current roster again.
        """
        with self._lock:
            try:
                room = self.get_room(code)
            except RoomNotFound as exc:
                self.transport.emit(sid, 'joinFailed', exc.reason)
                self.logger.info(f"[join-failed] code={code!r} sid={sid}")
                return None

            if room.find_player(sid) is not None:
                self.transport.emit(sid, 'joinedRoom', self._joined_payload(room))
                self.logger.info(f"[join-repeat] code={code} sid={sid}")
                return room

            room.players.append(Player(sid=sid, name=player_name))
            self.transport.join_channel(sid, code)
            self.transport.emit(sid, 'joinedRoom', self._joined_payload(room))
            self.transport.broadcast(code, 'playerJoined', {
                'playerName': player_name,
                'players': room.players_to_dict(),
            })
        self.logger.info(f"[player-joined] code={code} name={player_name} sid={sid} count={len(room.players)}")
        return room

    def handle_disconnect(self, sid: str) -> DisconnectOutcome:
        """Clean up after a lost connection.

        A departing host closes its room for everyone; a departing player is
        dropped from the first room that lists it. Host rooms are checked
        first and, on a match, the player scan is skipped.
        """
        with self._lock:
            for code, room in self._rooms.items():
                if room.host_sid == sid:
                    self.transport.broadcast(code, 'hostDisconnected', HOST_DISCONNECTED_REASON)
                    # The code can be reissued; old members must not hear the next room
                    self.transport.close_channel(code)
                    del self._rooms[code]
                    room.status = RoomStatus.CLOSED
                    self.logger.info(f"[room-closed] code={code} host={sid}")
                    return DisconnectOutcome.HOST_LEFT

            for code, room in self._rooms.items():
                player = room.find_player(sid)
                if player is None:
                    continue
                room.players.remove(player)
                self.transport.broadcast(code, 'playerLeft', {
                    'playerName': player.name,
                    'players': room.players_to_dict(),
                })
                self.logger.info(f"[player-left] code={code} name={player.name} sid={sid} count={len(room.players)}")
                return DisconnectOutcome.PLAYER_LEFT

        return DisconnectOutcome.UNKNOWN

    @staticmethod
    def _joined_payload(room: Room):
        return {
            'roomCode': room.code,
            'gameKind': room.game_kind,
            'players': room.players_to_dict(),
        }
