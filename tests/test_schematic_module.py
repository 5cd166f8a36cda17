from __future__ import annotations

import unittest

from schematic import MalformedNumberLiteral, SchematicConfig, SchematicPart, compute, run_schematic

from schematic_samples import ENGINE_SCHEMATIC


class TestSchematicModule(unittest.TestCase):
    def test_compute_each_part(self) -> None:
        self.assertEqual(compute(ENGINE_SCHEMATIC, SchematicPart.PART_ONE), 4361)
        self.assertEqual(compute(ENGINE_SCHEMATIC, "part2"), 467835)

    def test_compute_rejects_unknown_part(self) -> None:
        with self.assertRaises(ValueError):
            compute(ENGINE_SCHEMATIC, "part3")

    def test_compute_propagates_malformed_literal(self) -> None:
        with self.assertRaises(MalformedNumberLiteral):
            compute("99999999999*", SchematicPart.PART_ONE)

    def test_run_reports_both_parts_and_counts(self) -> None:
        result = run_schematic(text=ENGINE_SCHEMATIC)
        self.assertTrue(result.ok)
        self.assertEqual(result.errors, [])
        self.assertEqual(result.part_one, 4361)
        self.assertEqual(result.part_two, 467835)

        meta = result.meta
        self.assertEqual(meta["version"], "schematic_v1")
        self.assertEqual(meta["parts"], ["part1", "part2"])
        self.assertEqual(meta["config"]["gear_glyph"], "*")
        self.assertEqual(
            meta["counts"],
            {"rows": 10, "numbers": 10, "symbols": 6, "gear_candidates": 3, "part_numbers": 8, "gears": 2},
        )

    def test_run_single_part(self) -> None:
        result = run_schematic(text=ENGINE_SCHEMATIC, parts=[SchematicPart.PART_TWO])
        self.assertIsNone(result.part_one)
        self.assertEqual(result.part_two, 467835)
        self.assertNotIn("part_numbers", result.meta["counts"])

    def test_run_malformed_literal_has_no_partial_sums(self) -> None:
        result = run_schematic(text="1*\n.99999999999")
        self.assertFalse(result.ok)
        self.assertIsNone(result.part_one)
        self.assertIsNone(result.part_two)
        self.assertEqual(len(result.errors), 1)
        err = result.errors[0]
        self.assertEqual(err.code, "SCHEMATIC_MALFORMED_NUMBER")
        self.assertEqual(err.detail, {"literal": "99999999999", "row": 1, "col": 1, "limit": 2**32 - 1})

    def test_run_very_long_literal_is_reported(self) -> None:
        result = run_schematic(text="*" + "9" * 5000)
        self.assertFalse(result.ok)
        self.assertIsNone(result.part_one)
        self.assertEqual(result.errors[0].code, "SCHEMATIC_MALFORMED_NUMBER")
        self.assertEqual(result.errors[0].detail["col"], 1)

    def test_run_counts_numbers_next_to_spaces(self) -> None:
        result = run_schematic(text="12 .\n.. 7")
        self.assertEqual(result.part_one, 19)
        self.assertEqual(result.meta["counts"]["symbols"], 2)

    def test_run_with_custom_glyphs(self) -> None:
        text = ENGINE_SCHEMATIC.replace(".", "_").replace("*", "x")
        cfg = SchematicConfig(empty_glyph="_", gear_glyph="x")
        result = run_schematic(text=text, config=cfg)
        self.assertEqual((result.part_one, result.part_two), (4361, 467835))

    def test_run_without_row_index(self) -> None:
        result = run_schematic(text=ENGINE_SCHEMATIC, config=SchematicConfig(use_row_index=False))
        self.assertEqual((result.part_one, result.part_two), (4361, 467835))

    def test_empty_schematic(self) -> None:
        result = run_schematic(text="")
        self.assertTrue(result.ok)
        self.assertEqual((result.part_one, result.part_two), (0, 0))


class TestSchematicConfig(unittest.TestCase):
    def test_defaults(self) -> None:
        cfg = SchematicConfig()
        self.assertEqual(cfg.empty_glyph, ".")
        self.assertEqual(cfg.gear_glyph, "*")
        self.assertEqual(cfg.max_value, 2**32 - 1)

    def test_invalid_values_rejected(self) -> None:
        bad = [
            {"empty_glyph": "1"},
            {"empty_glyph": ".."},
            {"gear_glyph": ""},
            {"gear_glyph": "."},
            {"max_value": 8},
        ]
        for kwargs in bad:
            with self.subTest(**kwargs):
                with self.assertRaises(ValueError):
                    SchematicConfig(**kwargs)


if __name__ == "__main__":
    unittest.main()
