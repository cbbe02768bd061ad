"""Game domain services: boards, line counting, rooms and turn flow.

Pure game mechanics live here so socket handlers stay thin and the
state machine can be driven without a network layer.
"""
from .board import count_completed_lines, generate_board
from .rooms import Player, Room, RoomRegistry, RoomStatus
from .session import GameCoordinator

__all__ = [
    'count_completed_lines',
    'generate_board',
    'GameCoordinator',
    'Player',
    'Room',
    'RoomRegistry',
    'RoomStatus',
]
