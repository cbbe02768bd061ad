"""Room state and the registry of live rooms.

A ``Room`` is the per-game state machine (WAITING -> ACTIVE -> FINISHED).
The ``RoomRegistry`` owns the code -> Room mapping and the connection ->
code seat index. Callers must hold ``room.lock`` while mutating a room;
the registry takes its own lock for the maps only, always after the room
lock when both are needed.
"""
import enum
import logging
import threading
import uuid
from typing import Callable, Dict, List, Optional

from bingo.exceptions import AlreadyInRoom, IllegalMove, RoomFull, RoomNotFound
from .board import BOARD_CELLS, count_completed_lines, generate_board

logger = logging.getLogger(__name__)

MAX_PLAYERS = 2
CODE_LENGTH = 5


def generate_room_code(length=CODE_LENGTH):
    return uuid.uuid4().hex[:length].upper()


class RoomStatus(str, enum.Enum):
    WAITING = 'waiting'
    ACTIVE = 'active'
    FINISHED = 'finished'


class Player:
    def __init__(self, sid: str, name: str, board: List[int]):
        self.sid = sid
        self.name = name
        self.board = tuple(board)
        self.marks = [False] * BOARD_CELLS

    def mark(self, number) -> bool:
        """Mark the slot holding ``number``; False if it is not on this board."""
        try:
            idx = self.board.index(number)
        except ValueError:
            return False
        self.marks[idx] = True
        return True

    @property
    def completed_lines(self) -> int:
        return count_completed_lines(self.marks)


class Room:
    def __init__(self, code: str, creator: Player, lines_to_win: int = 5):
        self.code = code
        self.players: Dict[str, Player] = {creator.sid: creator}
        self.turn = creator.sid
        self.status = RoomStatus.WAITING
        self.lines_to_win = lines_to_win
        self.calls = 0
        self.lock = threading.RLock()

    @property
    def player_ids(self) -> List[str]:
        return list(self.players)

    def is_full(self) -> bool:
        return len(self.players) >= MAX_PLAYERS

    def add_player(self, player: Player) -> None:
        if self.status is RoomStatus.FINISHED:
            raise RoomNotFound(self.code)
        if self.is_full():
            raise RoomFull(self.code)
        self.players[player.sid] = player
        if len(self.players) == MAX_PLAYERS:
            self.status = RoomStatus.ACTIVE

    def remove_player(self, sid: str) -> Optional[Player]:
        return self.players.pop(sid, None)

    def other_player_id(self, sid: str) -> Optional[str]:
        return next((pid for pid in self.players if pid != sid), None)

    def boards(self) -> Dict[str, List[int]]:
        return {sid: list(p.board) for sid, p in self.players.items()}

    def marks(self) -> Dict[str, List[bool]]:
        return {sid: list(p.marks) for sid, p in self.players.items()}

    def call_number(self, sid: str, number) -> Optional[Player]:
        """Apply one call for the turn holder.

        Marks ``number`` on every board, then returns the winning player
        (first in seating order with enough completed lines) and finishes
        the room, or hands the turn to the other player and returns None.
        Raises ``IllegalMove`` without touching state when the room is not
        active or ``sid`` does not hold the turn.
        """
        if self.status is not RoomStatus.ACTIVE:
            raise IllegalMove(self.code, sid, f"room is {self.status.value}")
        if self.turn != sid:
            raise IllegalMove(self.code, sid, 'not your turn')

        for player in self.players.values():
            player.mark(number)
        self.calls += 1

        for player in self.players.values():
            if player.completed_lines >= self.lines_to_win:
                self.finish()
                return player

        self.turn = self.other_player_id(sid)
        return None

    def finish(self) -> None:
        self.status = RoomStatus.FINISHED


class RoomRegistry:
    """Live rooms keyed by uppercase code."""

    def __init__(
        self,
        board_factory: Callable[[], List[int]] = generate_board,
        code_factory: Callable[[], str] = generate_room_code,
        lines_to_win: int = 5,
    ):
        self._board_factory = board_factory
        self._code_factory = code_factory
        self.lines_to_win = lines_to_win
        self._rooms: Dict[str, Room] = {}
        self._seats: Dict[str, str] = {}
        self._lock = threading.Lock()

    def __len__(self):
        with self._lock:
            return len(self._rooms)

    def __contains__(self, code):
        return self.get(code) is not None

    @staticmethod
    def normalize(code) -> str:
        return str(code or '').strip().upper()

    def get(self, code) -> Optional[Room]:
        with self._lock:
            return self._rooms.get(self.normalize(code))

    def room_for(self, sid: str) -> Optional[Room]:
        with self._lock:
            code = self._seats.get(sid)
            return self._rooms.get(code) if code else None

    def create_room(self, sid: str, name: str) -> Room:
        with self._lock:
            if sid in self._seats:
                raise AlreadyInRoom(sid, self._seats[sid])
            player = Player(sid, name, self._board_factory())
            code = self._code_factory()
            while code in self._rooms:
                logger.warning(f"Room code collision on {code}, regenerating")
                code = self._code_factory()
            room = Room(code, player, lines_to_win=self.lines_to_win)
            self._rooms[code] = room
            self._seats[sid] = code
        logger.info(f"Room {code} created by {name!r} ({sid})")
        return room

    def join_room(self, code, sid: str, name: str) -> Room:
        room = self.get(code)
        if room is None:
            raise RoomNotFound(self.normalize(code))
        with room.lock:
            self.admit(room, sid, name)
        return room

    def admit(self, room: Room, sid: str, name: str) -> None:
        """Seat ``sid`` in ``room``. The caller must hold ``room.lock``."""
        with self._lock:
            if sid in self._seats:
                raise AlreadyInRoom(sid, self._seats[sid])
            if self._rooms.get(room.code) is not room:
                raise RoomNotFound(room.code)
            if room.is_full():
                raise RoomFull(room.code)
            room.add_player(Player(sid, name, self._board_factory()))
            self._seats[sid] = room.code
        logger.info(f"{name!r} ({sid}) joined room {room.code}")

    def remove_room(self, code) -> Optional[Room]:
        code = self.normalize(code)
        with self._lock:
            room = self._rooms.pop(code, None)
            if room is None:
                return None
            for sid in [s for s, c in self._seats.items() if c == code]:
                del self._seats[sid]
        room.finish()
        logger.info(f"Room {code} removed")
        return room
