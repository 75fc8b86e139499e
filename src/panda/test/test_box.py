import unittest
from hashlib import sha256
from nacl.secret import SecretBox
from panda import box, errors
from panda.kdf import derive_key

KEY = sha256(b"box key").digest()
OTHER_KEY = sha256(b"other box key").digest()

class Constants(unittest.TestCase):
    def test_sizes(self):
        self.assertEqual(box.BODY_SIZE, 128*1024)
        self.assertEqual(box.NONCE_SIZE, 24)
        self.assertEqual(box.OVERHEAD, 16)
        self.assertEqual(box.PADDED_SIZE, 128*1024 - 24 - 16)
        self.assertTrue(box.MAX_MESSAGE_LEN <= box.PADDED_SIZE - 2)
        self.assertEqual(box.MAX_MESSAGE_LEN, 0xffff)

class PadAndBox(unittest.TestCase):
    def test_fixed_size(self):
        for body in [b"", b"x", b"hello"*1000, b"\x00"*box.MAX_MESSAGE_LEN]:
            self.assertEqual(len(box.pad_and_box(KEY, body)), box.BODY_SIZE)

    def test_deterministic(self):
        self.assertEqual(box.pad_and_box(KEY, b"hello"),
                         box.pad_and_box(KEY, b"hello"))
        self.assertNotEqual(box.pad_and_box(KEY, b"hello"),
                            box.pad_and_box(KEY, b"world"))
        self.assertNotEqual(box.pad_and_box(KEY, b"hello"),
                            box.pad_and_box(OTHER_KEY, b"hello"))

    def test_nonce(self):
        boxed = box.pad_and_box(KEY, b"hello")
        self.assertEqual(boxed[:24], derive_key(KEY, b"hello")[:24])
        self.assertNotEqual(boxed[:24], box.pad_and_box(KEY, b"world")[:24])

    def test_roundtrip(self):
        for body in [b"", b"hello", bytes(range(256))*10,
                     b"\x00"*box.MAX_MESSAGE_LEN,
                     b"\xff"*box.MAX_MESSAGE_LEN]:
            self.assertEqual(box.unbox(KEY, box.pad_and_box(KEY, body)), body)

    def test_too_large(self):
        self.assertRaises(AssertionError, box.pad_and_box, KEY,
                          b"x" * (box.MAX_MESSAGE_LEN + 1))

class Unbox(unittest.TestCase):
    def test_too_short(self):
        self.assertRaises(errors.ReplyTooShort, box.unbox, KEY, b"")
        self.assertRaises(errors.ReplyTooShort, box.unbox, KEY, b"\x00"*41)
        # 42 bytes is long enough to try, but it won't authenticate
        self.assertRaises(errors.AuthenticationFailed, box.unbox, KEY,
                          b"\x00"*42)

    def test_wrong_key(self):
        boxed = box.pad_and_box(KEY, b"hello")
        self.assertRaises(errors.AuthenticationFailed, box.unbox, OTHER_KEY,
                          boxed)

    def test_tampered(self):
        boxed = box.pad_and_box(KEY, b"hello")
        for offset in [0, 23, 24, 39, 40, 41, 1000, len(boxed)-1]:
            for bit in [0x01, 0x80]:
                tampered = bytearray(boxed)
                tampered[offset] ^= bit
                self.assertRaises(errors.AuthenticationFailed, box.unbox,
                                  KEY, bytes(tampered))

    def test_truncated(self):
        boxed = box.pad_and_box(KEY, b"hello")
        self.assertRaises(errors.AuthenticationFailed, box.unbox, KEY,
                          boxed[:-1])

    def test_short_but_authentic(self):
        nonce = b"\x07" * 24
        sealed = SecretBox(KEY).encrypt(b"\x03\x00abc", nonce)
        self.assertEqual(box.unbox(KEY, nonce + sealed.ciphertext), b"abc")

    def test_corrupt_length(self):
        # authentic, but claims 16 bytes when only 3 follow
        nonce = b"\x07" * 24
        sealed = SecretBox(KEY).encrypt(b"\x10\x00abc", nonce)
        self.assertRaises(errors.CorruptMessage, box.unbox, KEY,
                          nonce + sealed.ciphertext)

if __name__ == '__main__':
    unittest.main()
