import os, binascii, math

def size_bits(maxval):
    return maxval.bit_length() or 1

def size_bytes(maxval):
    return int(math.ceil(size_bits(maxval) / 8))

def number_to_bytes(num):
    """Return the minimal big-endian magnitude of a non-negative integer.
    Zero encodes as the empty string."""
    if num < 0:
        raise ValueError("cannot encode a negative number")
    if num == 0:
        return b""
    num_bytes = size_bytes(num)
    fmt_str = "%0" + str(2*num_bytes) + "x"
    s = binascii.unhexlify((fmt_str % num).encode("ascii"))
    assert len(s) == num_bytes
    return s

def bytes_to_number(s):
    if not isinstance(s, bytes):
        raise TypeError
    if not s:
        return 0
    return int(binascii.hexlify(s), 16)

def length_prefixed(num):
    # 2-byte little-endian length, then the big-endian magnitude
    b = number_to_bytes(num)
    assert len(b) <= 0xffff, len(b)
    return bytes([len(b) & 0xff, len(b) >> 8]) + b

def generate_mask(maxval):
    num_bytes = size_bytes(maxval)
    num_bits = size_bits(maxval)
    leftover_bits = num_bits % 8
    if leftover_bits:
        top_byte_mask_int = (0x1 << leftover_bits) - 1
    else:
        top_byte_mask_int = 0xff
    assert 0 <= top_byte_mask_int <= 0xff
    return (top_byte_mask_int, num_bytes)

def random_list_of_ints(count, entropy_f=os.urandom):
    return list(entropy_f(count))
def mask_list_of_ints(top_byte_mask_int, list_of_ints):
    return [top_byte_mask_int & list_of_ints[0]] + list_of_ints[1:]
def list_of_ints_to_number(l):
    return bytes_to_number(bytes(l))

def unbiased_randrange(start, stop, entropy_f):
    """Return a random integer k such that start <= k < stop, uniformly
    distributed across that range, like random.randrange but driven by
    entropy_f (which behaves like os.urandom) and unbiased.

    Candidates are drawn with just enough bits to cover the range, and
    rejected when they land past the end. On average this takes fewer than
    two tries.
    """
    maxval = stop - start
    top_byte_mask_int, num_bytes = generate_mask(maxval)
    while True:
        enough_bytes = random_list_of_ints(num_bytes, entropy_f)
        if len(enough_bytes) != num_bytes:
            raise ValueError("entropy_f returned %d bytes, wanted %d"
                             % (len(enough_bytes), num_bytes))
        candidate_bytes = mask_list_of_ints(top_byte_mask_int, enough_bytes)
        candidate_int = list_of_ints_to_number(candidate_bytes)
        if candidate_int < maxval:
            return start + candidate_int
