import hmac
from hashlib import sha256
from .group import MODP4096
from .kdf import derive_key, SPAKE_CONTEXT
from .util import bytes_to_number, length_prefixed
from .errors import InvalidPublicValue

# key = scrypt(secret)
# pw = int(HMAC(key, "spake" + key))
# x = random(1..p-1)
# X* = g^x * N^pw
#  y = random(1..p-1)
#  Y* = g^y * N^pw
# K = (Y* * N^-pw)^x = g^xy = (X* * N^-pw)^y
# session_key = HMAC(key, lp(min(X*,Y*)) + lp(max(X*,Y*)) + lp(K))
#
# Both sides blind with the same N, so neither needs to know which side it
# is on. Sorting the public values gives both the same transcript.

def password_exponent(key):
    return bytes_to_number(derive_key(key, SPAKE_CONTEXT))

def password_mask(key, group=MODP4096):
    return group.exp(group.N, password_exponent(key))

def public_value(x, key, group=MODP4096):
    return group.mul(group.exp(group.g, x), password_mask(key, group))

def finalize_session_key(key, X, Y, K):
    first, second = sorted([X, Y])
    h = hmac.new(key, digestmod=sha256)
    h.update(length_prefixed(first))
    h.update(length_prefixed(second))
    h.update(length_prefixed(K))
    return h.digest()

def compute_session_key(key, x, X, Y, group=MODP4096):
    """Given our exponent x and masked value X, and the peer's masked value
    Y, return the 32-byte session key. Raises InvalidPublicValue if Y is not
    an element of Zp*."""
    if not group.is_valid_element(Y):
        raise InvalidPublicValue("invalid SPAKE value from peer")
    unmasked = group.mul(Y, group.inverse(password_mask(key, group)))
    K = group.exp(unmasked, x)
    return finalize_session_key(key, X, Y, K)
