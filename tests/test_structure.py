"""
Tests for heading detection.

Each heuristic is exercised on its own, then the detector is run end to end
on small documents.
"""

import unittest

from memory_layers.analysis.structure import (
    StructureDetector,
    match_all_caps,
    match_colon_terminated,
    match_enumerated_marker,
    match_keyword_prefix,
    short_isolated_matcher,
)
from memory_layers.models.structure import NO_STRUCTURE_TEXT
from memory_layers.utils.tokenization import SourceLine, split_lines


def line(text, index=0, preceded_by_blank=False):
    return SourceLine(text, index, preceded_by_blank)


class TestSplitLines(unittest.TestCase):

    def test_blank_lines_are_not_indexed(self):
        lines = split_lines("Title\n\n   \nBody text here\n")
        self.assertEqual([l.text for l in lines], ["Title", "Body text here"])
        self.assertEqual([l.index for l in lines], [0, 1])

    def test_blank_adjacency_is_recorded(self):
        lines = split_lines("First\nSecond\n\nThird")
        self.assertEqual([l.preceded_by_blank for l in lines], [True, False, True])


class TestRules(unittest.TestCase):

    def test_enumerated_markers(self):
        for text in ["1. First", "2) Second", "1.2. Nested", "IV. Roman", "a. Letter", "- bullet", "* star", "+ plus"]:
            self.assertEqual(match_enumerated_marker(line(text), None), 1, text)

    def test_enumerated_requires_whitespace_after_marker(self):
        self.assertIsNone(match_enumerated_marker(line("3.14 is close to pi"), None))
        self.assertIsNone(match_enumerated_marker(line("-5 degrees outside"), None))

    def test_all_caps_needs_letters(self):
        self.assertEqual(match_all_caps(line("INTRODUCTION"), None), 1)
        self.assertIsNone(match_all_caps(line("12345"), None))
        self.assertIsNone(match_all_caps(line("----"), None))

    def test_all_caps_length_bounds(self):
        self.assertIsNone(match_all_caps(line("ABC"), None))
        self.assertEqual(match_all_caps(line("ABCD"), None), 1)
        self.assertIsNone(match_all_caps(line("A" * 100), None))

    def test_keyword_prefix_is_case_insensitive(self):
        self.assertEqual(match_keyword_prefix(line("Chapitre 3 : la suite"), None), 1)
        self.assertEqual(match_keyword_prefix(line("summary of results"), None), 1)
        self.assertEqual(match_keyword_prefix(line("Résumé: points clés"), None), 1)
        self.assertIsNone(match_keyword_prefix(line("Partial results"), None))

    def test_colon_terminated(self):
        self.assertEqual(match_colon_terminated(line("Key ideas:"), None), 2)
        self.assertIsNone(match_colon_terminated(line("x" * 120 + ":"), None))

    def test_short_isolated_levels(self):
        match = short_isolated_matcher(80, 1.5)
        longer = line("A much longer line of body text follows the heading.", 1)
        self.assertEqual(match(line("Heading", preceded_by_blank=True), longer), 1)
        self.assertEqual(match(line("Heading"), longer), 2)
        self.assertEqual(match(line("Heading", preceded_by_blank=True), line("Tiny", 1)), 2)
        self.assertEqual(match(line("Last line"), None), 2)
        self.assertIsNone(match(line("Heading"), line("Tiny", 1)))

    def test_short_isolated_accepts_sentence_endings(self):
        match = short_isolated_matcher(80, 1.5)
        longer = line("This is a much longer body line of explanatory prose.", 1)
        self.assertEqual(match(line("Memo.", preceded_by_blank=True), longer), 1)
        self.assertEqual(match(line("A full sentence.", preceded_by_blank=True), None), 2)
        self.assertIsNone(match(line("x" * 80, preceded_by_blank=True), None))

    def test_short_isolated_can_skip_sentences(self):
        match = short_isolated_matcher(80, 1.5, skip_sentences=True)
        self.assertIsNone(match(line("A full sentence.", preceded_by_blank=True), None))
        self.assertIsNone(match(line("Wait;", preceded_by_blank=True), None))
        self.assertEqual(match(line("Heading", preceded_by_blank=True), None), 2)


class TestStructureDetector(unittest.TestCase):

    def setUp(self):
        self.detector = StructureDetector(short_line_max_length=80, longer_line_ratio=1.5)

    def test_all_caps_heading_scenario(self):
        structure = self.detector.detect("INTRODUCTION\n\nThis is a simple test sentence about testing.")
        self.assertEqual([s.text for s in structure if s.level == 1], ["INTRODUCTION"])
        # The short closing sentence is the last line, so it is minor.
        self.assertEqual(structure[1].level, 2)
        self.assertFalse(structure[0].empty)

    def test_numbered_points_scenario(self):
        text = (
            "1. First point\n"
            "Some longer explanatory content follows this line.\n"
            "2. Second point\n"
            "More content."
        )
        structure = self.detector.detect(text)
        major = [s for s in structure if s.level == 1]
        self.assertEqual([s.text for s in major], ["1. First point", "2. Second point"])
        self.assertEqual([s.line_index for s in major], [0, 2])

    def test_empty_input_returns_sentinel(self):
        for text in ["", "   \n\n  "]:
            structure = self.detector.detect(text)
            self.assertEqual(len(structure), 1)
            self.assertTrue(structure[0].empty)
            self.assertEqual(structure[0].text, NO_STRUCTURE_TEXT)
            self.assertEqual(structure[0].level, 1)
            self.assertEqual(structure[0].line_index, 0)

    def test_short_sentence_is_a_heading(self):
        structure = self.detector.detect("Memo.\nThis is a much longer body line of explanatory prose.")
        self.assertEqual((structure[0].text, structure[0].level), ("Memo.", 1))
        structure = self.detector.detect("Short note.")
        self.assertEqual([(s.text, s.level) for s in structure], [("Short note.", 2)])

    def test_short_prose_lines_are_minor(self):
        structure = self.detector.detect("Just one sentence of prose.\nAnd another one right here.")
        self.assertEqual([s.level for s in structure], [2, 2])
        self.assertFalse(structure[0].empty)

    def test_long_prose_has_no_structure(self):
        prose = "This sentence of ordinary prose keeps going well past the short-line limit of eighty."
        structure = self.detector.detect(prose + "\n" + prose)
        self.assertEqual(len(structure), 1)
        self.assertTrue(structure[0].empty)

    def test_skip_sentence_lines_option(self):
        detector = StructureDetector(skip_sentence_lines=True)
        structure = detector.detect("Just one sentence of prose.\nAnd another one right here.")
        self.assertTrue(structure[0].empty)
        structure = detector.detect("Memo\nThis is a much longer body line of explanatory prose.")
        self.assertEqual([(s.text, s.level) for s in structure], [("Memo", 1)])

    def test_invalid_thresholds_are_rejected(self):
        with self.assertRaises(ValueError):
            StructureDetector(short_line_max_length=0)
        with self.assertRaises(ValueError):
            StructureDetector(longer_line_ratio=0)

    def test_real_one_line_result_is_not_the_sentinel(self):
        structure = self.detector.detect("No structure detected")
        self.assertEqual(len(structure), 1)
        self.assertFalse(structure[0].empty)

    def test_levels_and_order(self):
        text = (
            "CHAPTER ONE\n"
            "\n"
            "Background:\n"
            "The study began in a small laboratory near the river, with two people.\n"
            "- a bullet item\n"
        )
        structure = self.detector.detect(text)
        self.assertEqual(
            [(s.text, s.level) for s in structure],
            [("CHAPTER ONE", 1), ("Background:", 1), ("- a bullet item", 1)],
        )
        for entry in structure:
            self.assertIn(entry.level, (1, 2))

    def test_rule_names_are_reported_in_order(self):
        names = self.detector.matching_rules(line("INTRODUCTION", preceded_by_blank=True), None)
        self.assertEqual(names, ["all_caps", "keyword_prefix", "short_isolated"])

    def test_detect_is_idempotent(self):
        text = "OVERVIEW\nSome words here that make a longer body line.\nNotes:"
        self.assertEqual(self.detector.detect(text), self.detector.detect(text))


if __name__ == "__main__":
    unittest.main()
