from hashlib import sha256
from itertools import count
from panda import stretch

class PRG:
    # this returns a callable which, when invoked with an integer N, will
    # return N pseudorandom bytes derived from the seed
    def __init__(self, seed):
        self.generator = self.block_generator(seed)

    def __call__(self, numbytes):
        return bytes([next(self.generator) for i in range(numbytes)])

    def block_generator(self, seed):
        assert isinstance(seed, bytes)
        for counter in count():
            cseed = b"".join([b"prng-",
                              str(counter).encode("ascii"),
                              b"-",
                              seed])
            block = sha256(cseed).digest()
            for b in block:
                yield b

class FastStretch:
    # mix into a TestCase to swap scrypt for SHA-256 while it runs
    def setUp(self):
        super().setUp()
        self._old_testing = stretch.TESTING
        stretch.TESTING = True

    def tearDown(self):
        stretch.TESTING = self._old_testing
        super().tearDown()

class RelayFull(Exception):
    pass

class MemoryRelay:
    """An in-memory stand-in for the PANDA server. Posting the same body
    twice is a no-op, a tag holds at most two distinct bodies, and get()
    returns the one that the asker didn't post."""
    def __init__(self):
        self.bodies = {}

    def post(self, tag, body):
        bodies = self.bodies.setdefault(tag, [])
        if body in bodies:
            return
        if len(bodies) >= 2:
            raise RelayFull("tag already holds two bodies")
        bodies.append(body)

    def get(self, tag, mine):
        for body in self.bodies.get(tag, []):
            if body != mine:
                return body
        return None

def run_round(relay, ex1, ex2):
    tag1, body1 = ex1.next_request()
    relay.post(tag1, body1)
    tag2, body2 = ex2.next_request()
    relay.post(tag2, body2)
    return (ex1.process(relay.get(tag1, body1)),
            ex2.process(relay.get(tag2, body2)))
