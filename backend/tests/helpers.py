from bingo.gateway import EventGateway

# Creator's board is 1..25 in order. The joiner's board keeps 22..25 on the
# cells 0, 6, 12 and 18, so calling 1..21 completes at most its last row and
# last column while the creator reaches 6 lines on the 21st call.
BOARD_A = list(range(1, 26))


def _board_b():
    fixed = {0: 22, 6: 23, 12: 24, 18: 25}
    rest = iter(range(1, 22))
    return [fixed[i] if i in fixed else next(rest) for i in range(25)]


BOARD_B = _board_b()


def fixed_boards(*boards):
    remaining = iter(boards or (BOARD_A, BOARD_B))
    return lambda: list(next(remaining))


def fixed_codes(*codes):
    remaining = iter(codes)
    return lambda: next(remaining)


class RecordingGateway(EventGateway):
    """Collects everything the game services ask the transport to do."""

    def __init__(self):
        self.sent = []
        self.groups = {}
        self.closed = []

    def send(self, message):
        self.sent.append(message)

    def join_group(self, sid, group):
        self.groups.setdefault(group, []).append(sid)

    def close_group(self, group):
        self.closed.append(group)
        self.groups.pop(group, None)

    def events(self, name):
        return [m for m in self.sent if m.event == name]
