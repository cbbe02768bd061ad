import logging
from typing import List, Optional

from bingo.exceptions import AlreadyInRoom, IllegalMove, PlayerDisconnected, RoomFull, RoomNotFound
from bingo.gateway import EventGateway, Outbound
from .rooms import Room, RoomRegistry, RoomStatus

logger = logging.getLogger(__name__)


class GameCoordinator:
    """Turns client requests into room mutations and outbound events.

    Every mutation, and every group join, runs under the room's lock. The
    resulting events are collected and handed to the gateway only after the
    lock is released.
    """

    def __init__(self, registry: RoomRegistry, gateway: EventGateway):
        self.registry = registry
        self.gateway = gateway

    def _deliver(self, outbound: List[Outbound]) -> None:
        for message in outbound:
            self.gateway.send(message)

    def _reject(self, sid: str, exc: Exception) -> None:
        logger.info(f"Rejected request from {sid}: {exc}")
        self.gateway.send(Outbound('error', str(exc), to=sid))

    def create_room(self, sid: str, name: str) -> Optional[Room]:
        try:
            room = self.registry.create_room(sid, name)
        except AlreadyInRoom as exc:
            self._reject(sid, exc)
            return None
        with room.lock:
            board = list(room.players[sid].board)
            self.gateway.join_group(sid, room.code)
        self._deliver([Outbound('room-created', {'roomCode': room.code, 'board': board}, to=sid)])
        return room

    def join_room(self, sid: str, code, name: str) -> Optional[Room]:
        room = self.registry.get(code)
        outbound = []
        try:
            if room is None:
                raise RoomNotFound(self.registry.normalize(code))
            with room.lock:
                self.registry.admit(room, sid, name)
                self.gateway.join_group(sid, room.code)
                # The creator may have left while the group was being joined
                if room.status is RoomStatus.ACTIVE and self.registry.get(room.code) is room:
                    outbound.append(Outbound('game-start', {
                        'boards': room.boards(),
                        'players': room.player_ids,
                        'turn': room.turn,
                    }, to=room.code))
        except (RoomNotFound, RoomFull, AlreadyInRoom) as exc:
            self._reject(sid, exc)
            return None

        self._deliver(outbound)
        return room

    def call_number(self, sid: str, code, number) -> None:
        room = self.registry.get(code)
        if room is None:
            logger.debug(f"Ignored call from {sid}: room {code!r} not found")
            return

        with room.lock:
            try:
                winner = room.call_number(sid, number)
            except IllegalMove as exc:
                logger.debug(str(exc))
                return
            if winner is not None:
                self.registry.remove_room(room.code)
                outbound = [Outbound('game-over', {'winner': winner.name}, to=room.code)]
            else:
                outbound = [Outbound('number-called', {
                    'number': number,
                    'marks': room.marks(),
                    'turn': room.turn,
                }, to=room.code)]

        self._deliver(outbound)
        if winner is not None:
            logger.info(f"Room {room.code} won by {winner.name!r} after {room.calls} calls")
            self.gateway.close_group(room.code)

    def disconnect(self, sid: str) -> None:
        room = self.registry.room_for(sid)
        if room is None:
            return

        with room.lock:
            if room.status is RoomStatus.FINISHED or room.remove_player(sid) is None:
                return
            if self.registry.remove_room(room.code) is None:
                return
            notice = PlayerDisconnected(room.code, sid)

        logger.info(f"Room {room.code} ended: {sid} disconnected")
        self._deliver([Outbound('error', str(notice), to=room.code, skip_sid=sid)])
        self.gateway.close_group(room.code)
