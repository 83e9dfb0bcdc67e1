"""
GRP Tests — directive grammar, catalogue resolution, pure application.
"""

import os
import sys
import unittest

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, PROJECT_ROOT)

from misra_gcs.errors import ParseError
from misra_gcs.grp import GrpProcessor, apply_grp, parse_grp_line
from misra_gcs.models import GrpEntry, IngestionErrorKind, TextInput
from misra_gcs.ruleset import MISRA_C_2012, Catalogue, Category, Guideline, RulesetModel


def r1_catalogue() -> Catalogue:
    return Catalogue("R1", [
        Guideline("Rule 101", Category.MANDATORY, "mandatory guideline"),
        Guideline("Rule 102", Category.REQUIRED, "required guideline"),
        Guideline("Rule 103", Category.ADVISORY, "advisory guideline"),
    ])


class TestGrpGrammar(unittest.TestCase):

    def test_whitespace_separated(self):
        d = parse_grp_line("Rule 15.5   Disapplied   single exit is not required here")
        self.assertEqual(d.guideline, "Rule 15.5")
        self.assertEqual(d.category, Category.DISAPPLIED)
        self.assertEqual(d.justification, "single exit is not required here")

    def test_punctuation_separators(self):
        d = parse_grp_line("Dir 4.6; required; fixed-width types")
        self.assertEqual(d.guideline, "Dir 4.6")
        self.assertEqual(d.category, Category.REQUIRED)
        self.assertEqual(d.justification, "fixed-width types")

        d = parse_grp_line("10.3, ADVISORY")
        self.assertEqual(d.guideline, "10.3")
        self.assertEqual(d.category, Category.ADVISORY)
        self.assertIsNone(d.justification)

    def test_comments_and_blanks(self):
        for line in ("", "   ", "# plan for release 2", "// legacy comment"):
            self.assertIsNone(parse_grp_line(line))

    def test_malformed(self):
        for line in ("Rule 10.4", "Rule 10.4 optional", "disapply everything"):
            with self.assertRaises(ParseError, msg=line):
                parse_grp_line(line)


class TestGrpProcessor(unittest.TestCase):

    def setUp(self):
        self.processor = GrpProcessor(r1_catalogue())

    def parse(self, *lines):
        return self.processor.parse(TextInput(label="plan.grp", lines=lines))

    def test_absent_grp_means_defaults(self):
        entries, errors = self.processor.parse(None)
        self.assertEqual(entries, [])
        self.assertEqual(errors, [])

    def test_unreadable_grp(self):
        entries, errors = self.processor.parse(TextInput(label="plan.grp", error="No such file"))
        self.assertEqual(len(errors), 1)
        self.assertEqual(errors[0].kind, IngestionErrorKind.MISSING_INPUT)

    def test_entries_resolved_with_line_numbers(self):
        entries, errors = self.parse("# header", "103 Disapplied not used", "102 advisory")
        self.assertEqual(errors, [])
        self.assertEqual([(e.guideline, e.category, e.line) for e in entries], [
            ("Rule 103", Category.DISAPPLIED, 2),
            ("Rule 102", Category.ADVISORY, 3),
        ])

    def test_malformed_line_is_attributed(self):
        entries, errors = self.parse("103 Disapplied", "garbage here")
        self.assertEqual(len(entries), 1)
        self.assertEqual(len(errors), 1)
        self.assertEqual(errors[0].kind, IngestionErrorKind.INVALID_GRP)
        self.assertEqual(errors[0].line, 2)
        self.assertEqual(errors[0].text, "garbage here")

    def test_unknown_guideline(self):
        entries, errors = self.parse("999 Disapplied")
        self.assertEqual(entries, [])
        self.assertIn("Unknown guideline", errors[0].message)

    def test_duplicate_first_wins(self):
        entries, errors = self.parse("103 Disapplied", "Rule 103 Required")
        self.assertEqual(len(entries), 1)
        self.assertEqual(entries[0].category, Category.DISAPPLIED)
        self.assertEqual(errors[0].line, 2)
        self.assertIn("first given on line 1", errors[0].message)

    def test_real_catalogue(self):
        processor = GrpProcessor(RulesetModel.default().catalogue(MISRA_C_2012))
        entries, errors = processor.parse(TextInput(label="grp", lines=("R15.5 Disapplied",)))
        self.assertEqual(errors, [])
        self.assertEqual(entries[0].guideline, "Rule 15.5")


class TestApplyGrp(unittest.TestCase):

    def setUp(self):
        self.guidelines = r1_catalogue().guidelines

    def test_no_entries_keeps_defaults(self):
        effective, errors = apply_grp(self.guidelines, [])
        self.assertEqual(errors, [])
        self.assertEqual([e.category for e in effective],
                         [Category.MANDATORY, Category.REQUIRED, Category.ADVISORY])
        self.assertFalse(any(e.recategorized for e in effective))

    def test_disapply_advisory(self):
        effective, errors = apply_grp(self.guidelines, [
            GrpEntry(guideline="Rule 103", category=Category.DISAPPLIED, justification="n/a", line=1),
        ])
        self.assertEqual(errors, [])
        self.assertEqual(effective[2].category, Category.DISAPPLIED)
        self.assertEqual(effective[2].default_category, Category.ADVISORY)
        self.assertEqual(effective[2].justification, "n/a")
        self.assertTrue(effective[2].recategorized)

    def test_escalate_advisory(self):
        effective, _ = apply_grp(self.guidelines, [
            GrpEntry(guideline="Rule 103", category=Category.MANDATORY, line=1),
        ])
        self.assertEqual(effective[2].category, Category.MANDATORY)

    def test_mandatory_cannot_be_relaxed(self):
        for target in (Category.REQUIRED, Category.ADVISORY, Category.DISAPPLIED):
            effective, errors = apply_grp(self.guidelines, [
                GrpEntry(guideline="Rule 101", category=target, line=4),
            ])
            self.assertEqual(effective[0].category, Category.MANDATORY)
            self.assertEqual(len(errors), 1)
            self.assertEqual(errors[0].kind, IngestionErrorKind.INVALID_GRP)
            self.assertEqual(errors[0].line, 4)

    def test_catalogue_untouched(self):
        apply_grp(self.guidelines, [GrpEntry(guideline="Rule 102", category=Category.DISAPPLIED)])
        self.assertEqual(self.guidelines[1].category, Category.REQUIRED)

    def test_order_preserved(self):
        effective, _ = apply_grp(self.guidelines, [
            GrpEntry(guideline="Rule 103", category=Category.REQUIRED),
            GrpEntry(guideline="Rule 102", category=Category.ADVISORY),
        ])
        self.assertEqual([e.code for e in effective], ["Rule 101", "Rule 102", "Rule 103"])


if __name__ == "__main__":
    unittest.main()
