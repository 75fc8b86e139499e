import os, json, binascii
from binascii import hexlify, unhexlify
from .group import MODP4096
from .stretch import stretch_secret, KEY_SIZE
from .kdf import derive_key, ROUND_ONE_TAG, ROUND_TWO_TAG
from .box import pad_and_box, unbox, MAX_MESSAGE_LEN
from .spake import public_value, compute_session_key
from .util import number_to_bytes, bytes_to_number
from .errors import MessageTooLarge, DeserializationError

# Round one: both sides post their masked SPAKE2 value under a tag derived
# from the key, boxed under the key itself. Round two: both sides post their
# message under a second tag, boxed under the session key that SPAKE2 gave
# them. Anybody who brute-forces the secret after round one completes only
# learns the key, which no longer protects anything.

class RoundOne:
    "Waiting for the peer's SPAKE2 value."
    def __init__(self, key, message, x, X):
        self.key = key
        self.message = message
        self.x = x
        self.X = X

class RoundTwo:
    "The session key is established; waiting for (or holding) the message."
    def __init__(self, key, message, session_key):
        self.key = key
        self.message = message
        self.session_key = session_key


class Exchange:
    """One side of a PANDA exchange.

    Creating an Exchange runs scrypt over the shared secret, which takes
    seconds and about 128MiB. After that, call next_request() and post the
    (tag, body) it returns to the server. When the server has a different
    body under that tag, feed it to process(). process() returns None after
    the first round, meaning: call next_request() again. After the second
    round it returns the peer's message, and the exchange is complete.

    next_request() is idempotent, and so is process() once the session key
    has been established, so either can be retried freely. Between calls,
    serialize() the Exchange to keep it across restarts; the result holds
    secrets and is not encrypted.

    An Exchange is not safe to mutate from several threads at once.
    """

    def __init__(self, secret, message, entropy_f=os.urandom,
                 group=MODP4096):
        assert isinstance(secret, bytes), repr(secret)
        assert isinstance(message, bytes), repr(message)
        if len(message) > MAX_MESSAGE_LEN:
            raise MessageTooLarge("message too large: %d > %d"
                                  % (len(message), MAX_MESSAGE_LEN))
        key = stretch_secret(secret)
        x = group.random_exponent(entropy_f)
        X = public_value(x, key, group)
        self.group = group
        self._state = RoundOne(key, message, x, X)

    @classmethod
    def _from_state(klass, state, group=MODP4096):
        self = klass.__new__(klass)
        self.group = group
        self._state = state
        return self

    @property
    def session_established(self):
        return isinstance(self._state, RoundTwo)

    @property
    def session_key(self):
        if self.session_established:
            return self._state.session_key
        return None

    @property
    def message(self):
        return self._state.message

    def next_request(self):
        """Return (tag, body) to post to the server."""
        s = self._state
        if isinstance(s, RoundOne):
            tag = derive_key(s.key, ROUND_ONE_TAG)
            body = pad_and_box(s.key, number_to_bytes(s.X))
        else:
            tag = derive_key(s.key, ROUND_TWO_TAG)
            body = pad_and_box(s.session_key, s.message)
        return tag, body

    def process(self, reply):
        """Process the peer's body, as fetched from the server under the tag
        from next_request(). Returns None if another round is needed, or the
        peer's message once the exchange is complete.

        On any error the Exchange is left exactly as it was."""
        s = self._state
        if isinstance(s, RoundOne):
            body = unbox(s.key, reply)
            Y = bytes_to_number(body)
            session_key = compute_session_key(s.key, s.x, s.X, Y, self.group)
            self._state = RoundTwo(s.key, s.message, session_key)
            return None
        return unbox(s.session_key, reply)

    def serialize(self):
        s = self._state
        if isinstance(s, RoundOne):
            x_bytes, X_bytes, session_key = (number_to_bytes(s.x),
                                             number_to_bytes(s.X), b"")
        else:
            x_bytes, X_bytes, session_key = b"", b"", s.session_key
        assert len(s.key) == KEY_SIZE
        assert len(session_key) in (0, KEY_SIZE)
        d = {"key": hexlify(s.key).decode("ascii"),
             "message": hexlify(s.message).decode("ascii"),
             "x": hexlify(x_bytes).decode("ascii"),
             "X": hexlify(X_bytes).decode("ascii"),
             "shared_key": hexlify(session_key).decode("ascii"),
             }
        return json.dumps(d).encode("ascii")

    @classmethod
    def from_serialized(klass, data, group=MODP4096):
        try:
            d = json.loads(data.decode("ascii"))
            if not isinstance(d, dict):
                raise DeserializationError("serialized state is not a dict")
            fields = {}
            for name in ["key", "message", "x", "X", "shared_key"]:
                if not isinstance(d[name], str):
                    raise DeserializationError("%s is not a string" % name)
                fields[name] = unhexlify(d[name].encode("ascii"))
        except (UnicodeError, ValueError, KeyError, binascii.Error) as e:
            raise DeserializationError("malformed serialized state: %r" % (e,))

        key = fields["key"]
        message = fields["message"]
        session_key = fields["shared_key"]
        if len(key) != KEY_SIZE:
            raise DeserializationError("key must be %d bytes" % KEY_SIZE)
        if len(message) > MAX_MESSAGE_LEN:
            raise DeserializationError("message too large")
        if session_key:
            if len(session_key) != KEY_SIZE:
                raise DeserializationError("shared_key must be empty or %d"
                                           " bytes" % KEY_SIZE)
            return klass._from_state(RoundTwo(key, message, session_key),
                                     group)

        x = bytes_to_number(fields["x"])
        X = bytes_to_number(fields["X"])
        if not 0 < x < group.p:
            raise DeserializationError("x out of range")
        if not group.is_valid_element(X):
            raise DeserializationError("X out of range")
        return klass._from_state(RoundOne(key, message, x, X), group)
