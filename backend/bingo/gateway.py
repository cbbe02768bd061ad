"""Outbound side of the real-time transport.

The game services never touch Socket.IO directly; they ask an
``EventGateway`` to deliver events and manage groups. ``SocketIOGateway``
is the production implementation. Its group helpers go through
``flask_socketio`` and so must run inside a Socket.IO handler context.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional

from flask_socketio import close_room, join_room


@dataclass
class Outbound:
    event: str
    payload: Any
    to: str
    skip_sid: Optional[str] = None


class EventGateway(ABC):
    @abstractmethod
    def send(self, message: Outbound) -> None:
        """Deliver one event to a connection or a whole group."""

    @abstractmethod
    def join_group(self, sid: str, group: str) -> None:
        """Add a connection to a named group."""

    @abstractmethod
    def close_group(self, group: str) -> None:
        """Drop every member of a group."""


class SocketIOGateway(EventGateway):
    def __init__(self, socketio, namespace='/'):
        self.socketio = socketio
        self.namespace = namespace

    def send(self, message: Outbound) -> None:
        self.socketio.emit(
            message.event,
            message.payload,
            to=message.to,
            skip_sid=message.skip_sid,
            namespace=self.namespace,
        )

    def join_group(self, sid: str, group: str) -> None:
        join_room(group, sid=sid, namespace=self.namespace)

    def close_group(self, group: str) -> None:
        close_room(group, namespace=self.namespace)
