import hmac
from hashlib import sha256

SPAKE_CONTEXT = b"spake"
ROUND_ONE_TAG = b"round one tag"
ROUND_TWO_TAG = b"round two tag"

def derive_key(key, context):
    """Derive a 32-byte value for the given context from a master or session
    key. The key is both the HMAC key and a suffix of the message, which ties
    every derived value to this particular exchange's secret."""
    assert isinstance(key, bytes), repr(key)
    assert isinstance(context, bytes), repr(context)
    h = hmac.new(key, digestmod=sha256)
    h.update(context)
    h.update(key)
    return h.digest()
