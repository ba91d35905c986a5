"""Infrastructure components for the elevator fleet"""

from .command_channel import Command, CommandChannel, CommandType
from .message_broker import MessageBroker
from .state_lock import StateLock

__all__ = [
    'Command',
    'CommandChannel',
    'CommandType',
    'MessageBroker',
    'StateLock',
]
