from hashlib import scrypt, sha256

# The shared secret cannot be salted: both sides have to arrive at the same
# key from the secret alone. The cost parameters are all that stands between
# an eavesdropper and an offline dictionary attack on a human-memorable
# secret, so they are high.
SCRYPT_N = 1 << 16
SCRYPT_R = 16
SCRYPT_P = 4
KEY_SIZE = 32
# scrypt needs 128*r*N bytes for its working array, plus the 128*r*p output
# blocks. OpenSSL refuses anything over 32MiB unless told otherwise.
SCRYPT_MAXMEM = 128 * SCRYPT_R * (SCRYPT_N + SCRYPT_P) + (1 << 20)

# Only the test suite may set this. It replaces scrypt with a single SHA-256
# so that tests don't spend seconds and 128MiB per Exchange.
TESTING = False

def stretch_secret(secret):
    assert isinstance(secret, bytes), repr(secret)
    if TESTING:
        return sha256(secret).digest()
    key = scrypt(secret, salt=b"", n=SCRYPT_N, r=SCRYPT_R, p=SCRYPT_P,
                 maxmem=SCRYPT_MAXMEM, dklen=KEY_SIZE)
    assert len(key) == KEY_SIZE
    return key
