
from .exchange import Exchange
from .box import BODY_SIZE, MAX_MESSAGE_LEN
from .errors import (PandaError, MessageTooLarge, ReplyTooShort,
                     AuthenticationFailed, InvalidPublicValue, CorruptMessage,
                     DeserializationError)
_hush_pyflakes = [Exchange, BODY_SIZE, MAX_MESSAGE_LEN,
                  PandaError, MessageTooLarge, ReplyTooShort,
                  AuthenticationFailed, InvalidPublicValue, CorruptMessage,
                  DeserializationError]
del _hush_pyflakes

__version__ = "0.1.0"
