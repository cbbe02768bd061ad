"""Domain errors for the bingo coordinator.

User-facing errors carry the exact message sent to the client on the
``error`` event, so socket handlers can forward ``str(exc)`` as-is.
"""


class BingoError(Exception):
    """Base class for all game errors."""
    pass


class RoomNotFound(BingoError):
    def __init__(self, code):
        self.code = code
        super().__init__('Room does not exist.')


class RoomFull(BingoError):
    def __init__(self, code):
        self.code = code
        super().__init__('Room is already full.')


class AlreadyInRoom(BingoError):
    """A connection tried to take a second seat while still seated."""
    def __init__(self, sid, code):
        self.sid = sid
        self.code = code
        super().__init__('You are already in a room.')


class IllegalMove(BingoError):
    """Out-of-turn call or a call against an unknown/inactive room.

    Never surfaced to clients; the coordinator drops the call.
    """
    def __init__(self, code, sid, reason):
        self.code = code
        self.sid = sid
        self.reason = reason
        super().__init__(f"Ignored call from {sid} in room {code}: {reason}")


class PlayerDisconnected(BingoError):
    def __init__(self, code, sid):
        self.code = code
        self.sid = sid
        super().__init__('A player has disconnected. Game ended.')
