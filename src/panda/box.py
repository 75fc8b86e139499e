from nacl.secret import SecretBox
from nacl.exceptions import CryptoError
from .kdf import derive_key
from .errors import ReplyTooShort, AuthenticationFailed, CorruptMessage

# Every body is padded to BODY_SIZE so the server learns nothing from its
# length.
BODY_SIZE = 1 << 17
NONCE_SIZE = SecretBox.NONCE_SIZE
OVERHEAD = SecretBox.MACBYTES
PADDED_SIZE = BODY_SIZE - NONCE_SIZE - OVERHEAD
# the two bytes are the little-endian length prefix, which also caps the
# length at 0xffff
MAX_MESSAGE_LEN = min(PADDED_SIZE - 2, 0xffff)

def pad_and_box(key, body):
    """Pad body to a fixed size and seal it under key. The nonce is derived
    from the key and the body, so calling this twice with the same arguments
    produces identical output."""
    if len(body) > MAX_MESSAGE_LEN:
        raise AssertionError("argument to pad_and_box too large: %d"
                             % len(body))
    nonce = derive_key(key, body)[:NONCE_SIZE]

    padded = bytearray(PADDED_SIZE)
    padded[0] = len(body) & 0xff
    padded[1] = len(body) >> 8
    padded[2:2+len(body)] = body

    sealed = SecretBox(key).encrypt(bytes(padded), nonce)
    boxed = nonce + sealed.ciphertext
    assert len(boxed) == BODY_SIZE, len(boxed)
    return boxed

def unbox(key, boxed):
    if len(boxed) < NONCE_SIZE + OVERHEAD + 2:
        raise ReplyTooShort("reply from server is too short to be valid")
    nonce = boxed[:NONCE_SIZE]
    try:
        unsealed = SecretBox(key).decrypt(boxed[NONCE_SIZE:], nonce)
    except CryptoError:
        raise AuthenticationFailed("failed to authenticate reply from server")
    length = unsealed[0] | (unsealed[1] << 8)
    unsealed = unsealed[2:]
    if length > len(unsealed):
        raise CorruptMessage("corrupt but authentic message found")
    return unsealed[:length]
