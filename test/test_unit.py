#!/usr/bin/env python3

import copy
import pickle
import unittest

from httpranges.unit import KnownUnit, RangeUnit


class RangeUnitTest(unittest.TestCase):
    def test_from_raw(self) -> None:
        i = 0
        for (token, expected_raw, expected_known) in [
            ("bytes", "bytes", KnownUnit.BYTES),
            ("Bytes", "Bytes", None),
            ("BYTES", "BYTES", None),
            ("pages", "pages", None),
            ("Pages", "Pages", None),
            ("", "", None),
        ]:
            unit = RangeUnit.from_raw(token)
            self.assertEqual(expected_raw, unit.to_raw(), f"[{i}] {token!r}")
            self.assertEqual(expected_known, unit.known, f"[{i}] {token!r}")
            i += 1

    def test_bytes(self) -> None:
        self.assertEqual(RangeUnit.from_raw("bytes"), RangeUnit.BYTES)
        self.assertEqual("bytes", str(RangeUnit.BYTES))
        self.assertIs(KnownUnit.BYTES, RangeUnit.BYTES.known)

    def test_equality(self) -> None:
        self.assertEqual(RangeUnit("pages"), RangeUnit("pages"))
        self.assertNotEqual(RangeUnit("pages"), RangeUnit("Pages"))
        self.assertNotEqual(RangeUnit("bytes"), "bytes")
        self.assertEqual(
            {RangeUnit("pages"), RangeUnit.from_raw("pages")}, {RangeUnit("pages")}
        )

    def test_only_registered_spelling_is_known(self) -> None:
        self.assertIsNone(RangeUnit("BYTES").known)
        self.assertNotEqual(RangeUnit("BYTES"), RangeUnit.BYTES)
        self.assertEqual("BYTES", RangeUnit.from_raw("BYTES").to_raw())

    def test_copy_and_pickle(self) -> None:
        unit = RangeUnit("pages")
        self.assertEqual(unit, copy.copy(unit))
        self.assertEqual(unit, copy.deepcopy(unit))
        self.assertEqual(unit, pickle.loads(pickle.dumps(unit)))
        self.assertEqual(RangeUnit.BYTES, pickle.loads(pickle.dumps(RangeUnit.BYTES)))

    def test_immutable(self) -> None:
        with self.assertRaises(AttributeError):
            RangeUnit.BYTES._token = "pages"  # type: ignore

    def test_bad_token_type(self) -> None:
        with self.assertRaises(TypeError):
            RangeUnit(b"bytes")  # type: ignore

    def test_repr(self) -> None:
        self.assertEqual("RangeUnit('bytes')", repr(RangeUnit.BYTES))


if __name__ == "__main__":
    unittest.main()
