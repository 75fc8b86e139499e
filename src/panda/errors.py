
class PandaError(Exception):
    pass

class MessageTooLarge(PandaError):
    """The message handed to Exchange() will not fit in a padded body.
    Shorten it to at most MAX_MESSAGE_LEN bytes."""

class ReplyTooShort(PandaError):
    """The reply from the server is too short to be a valid body."""

class AuthenticationFailed(PandaError):
    """The reply did not authenticate under our key. Either it was tampered
    with, or the peer is using a different shared secret."""

class InvalidPublicValue(PandaError):
    """The peer's SPAKE value is not an element of the group."""

class CorruptMessage(PandaError):
    """The reply authenticated, but its inner length prefix is impossible.
    An honest peer never produces this."""

class DeserializationError(PandaError):
    """The serialized state is malformed."""
