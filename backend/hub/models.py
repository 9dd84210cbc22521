from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional


class RoomStatus(str, Enum):
    WAITING = 'waiting'
    ACTIVE = 'active'
    CLOSED = 'closed'


@dataclass
class Player:
    sid: str
    name: str

    def to_dict(self):
        return {
            'id': self.sid,
            'name': self.name,
        }


@dataclass
class Room:
    code: str
    host_sid: str
    game_kind: Any
    players: List[Player] = field(default_factory=list)
    status: RoomStatus = RoomStatus.WAITING

    def find_player(self, sid: str) -> Optional[Player]:
        return next((p for p in self.players if p.sid == sid), None)

    def players_to_dict(self):
        return [p.to_dict() for p in self.players]
