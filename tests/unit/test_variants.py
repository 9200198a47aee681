from __future__ import annotations

import unittest

from sha2hasher.hashing import HashVariant


class HashVariantTests(unittest.TestCase):
    def test_digest_sizes(self) -> None:
        sizes = {variant: variant.digest_size for variant in HashVariant}
        self.assertEqual(
            sizes,
            {
                HashVariant.SHA224: 28,
                HashVariant.SHA256: 32,
                HashVariant.SHA384: 48,
                HashVariant.SHA512: 64,
            },
        )
        self.assertEqual([v.hex_length for v in HashVariant], [56, 64, 96, 128])

    def test_new_returns_fresh_state(self) -> None:
        for variant in HashVariant:
            first = variant.new()
            first.update(b"abc")
            second = variant.new()
            self.assertEqual(second.digest_size, variant.digest_size)
            self.assertNotEqual(first.hexdigest(), second.hexdigest())

    def test_parse_accepts_common_spellings(self) -> None:
        for value in ("sha256", "SHA256", "SHA-256", "sha_256", " Sha-256 ", "256", 256, HashVariant.SHA256):
            with self.subTest(value=value):
                self.assertIs(HashVariant.parse(value), HashVariant.SHA256)
        self.assertIs(HashVariant.parse("SHA-512"), HashVariant.SHA512)

    def test_parse_rejects_other_algorithms(self) -> None:
        for value in ("md5", "sha1", "sha3-256", 128, True, None, 2.5):
            with self.subTest(value=value):
                with self.assertRaises(ValueError):
                    HashVariant.parse(value)

    def test_from_hex_length(self) -> None:
        self.assertIs(HashVariant.from_hex_length(56), HashVariant.SHA224)
        self.assertIs(HashVariant.from_hex_length(128), HashVariant.SHA512)
        with self.assertRaises(ValueError):
            HashVariant.from_hex_length(40)

    def test_label(self) -> None:
        self.assertEqual(HashVariant.SHA384.label, "SHA-384")


if __name__ == "__main__":
    unittest.main()
