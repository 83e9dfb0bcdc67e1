"""
Ruleset Model Tests — catalogues, guideline lookup, category state machine.
"""

import os
import sys
import unittest

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, PROJECT_ROOT)

from misra_gcs.errors import UnsupportedRulesetError
from misra_gcs.ruleset import (
    MISRA_C_2004, MISRA_C_2012, MISRA_CPP_2008,
    Catalogue, Category, Guideline, RulesetModel,
    format_guideline_explanation, guideline_key,
)


class TestCatalogues(unittest.TestCase):

    @classmethod
    def setUpClass(cls):
        cls.model = RulesetModel.default()

    def test_versions(self):
        self.assertEqual(
            sorted(self.model.versions()),
            sorted([MISRA_C_2004, MISRA_C_2012, MISRA_CPP_2008]),
        )

    def test_c2012_size(self):
        guidelines = self.model.guidelines_for(MISRA_C_2012)
        self.assertEqual(len(guidelines), 159)
        self.assertEqual(sum(1 for g in guidelines if g.is_directive), 16)

    def test_c2012_mandatory_rules(self):
        mandatory = [g.code for g in self.model.guidelines_for(MISRA_C_2012)
                     if g.category == Category.MANDATORY]
        self.assertEqual(len(mandatory), 10)
        self.assertIn("Rule 9.1", mandatory)
        self.assertIn("Rule 22.6", mandatory)

    def test_c2004_size(self):
        self.assertEqual(len(self.model.guidelines_for(MISRA_C_2004)), 142)

    def test_cpp2008_size(self):
        guidelines = self.model.guidelines_for(MISRA_CPP_2008)
        self.assertEqual(len(guidelines), 228)
        self.assertEqual(guidelines[0].code, "Rule 0-1-1")
        self.assertEqual(guidelines[-1].code, "Rule 27-0-1")

    def test_document_rules_are_required(self):
        g = self.model.catalogue(MISRA_CPP_2008).lookup("0-3-1")
        self.assertEqual(g.category, Category.REQUIRED)

    def test_canonical_order_preserved(self):
        codes = [g.code for g in self.model.guidelines_for(MISRA_C_2012)]
        self.assertEqual(codes[0], "Dir 1.1")
        self.assertLess(codes.index("Rule 9.1"), codes.index("Rule 10.1"))
        self.assertLess(codes.index("Rule 20.9"), codes.index("Rule 20.10"))

    def test_no_default_disapplied(self):
        for version in self.model.versions():
            for g in self.model.guidelines_for(version):
                self.assertNotEqual(g.category, Category.DISAPPLIED)

    def test_unsupported_version(self):
        with self.assertRaises(UnsupportedRulesetError):
            self.model.guidelines_for("MISRA C:2023")


class TestResolve(unittest.TestCase):

    def setUp(self):
        self.model = RulesetModel.default()

    def test_spellings(self):
        for name in ("MISRA C:2012", "MISRA-C:2012", "misra c 2012", "c2012"):
            self.assertEqual(self.model.resolve(name), MISRA_C_2012, name)
        for name in ("MISRA C++:2008", "MISRA C++ 2008", "misra-cpp-2008"):
            self.assertEqual(self.model.resolve(name), MISRA_CPP_2008, name)

    def test_empty_name(self):
        with self.assertRaises(UnsupportedRulesetError):
            self.model.resolve("")

    def test_fabricated_ruleset(self):
        cat = Catalogue("R1", [Guideline("Rule 101", Category.MANDATORY, "x")])
        model = RulesetModel([cat])
        self.assertEqual(model.resolve("R1"), "R1")
        self.assertEqual(len(model.guidelines_for("R1")), 1)


class TestLookup(unittest.TestCase):

    def setUp(self):
        model = RulesetModel.default()
        self.c2012 = model.catalogue(MISRA_C_2012)
        self.cpp = model.catalogue(MISRA_CPP_2008)

    def test_rule_spellings(self):
        for token in ("Rule 10.4", "rule 10.4", "R10.4", "10.4", "Rule10.4"):
            self.assertEqual(self.c2012.lookup(token).code, "Rule 10.4", token)

    def test_directive_spellings(self):
        for token in ("Dir 4.1", "Directive 4.1", "D4.1", "dir 4.1"):
            self.assertEqual(self.c2012.lookup(token).code, "Dir 4.1", token)

    def test_rule_and_directive_distinct(self):
        self.assertNotEqual(self.c2012.lookup("Rule 4.1").description,
                            self.c2012.lookup("Dir 4.1").description)

    def test_cpp_separators(self):
        self.assertEqual(self.cpp.lookup("5-0-3").code, "Rule 5-0-3")
        self.assertEqual(self.cpp.lookup("5.0.3").code, "Rule 5-0-3")

    def test_unknown(self):
        self.assertIsNone(self.c2012.lookup("Rule 99.9"))
        self.assertIsNone(self.c2012.lookup("banana"))

    def test_guideline_key(self):
        self.assertEqual(guideline_key("Rule 0-1-1"), ("Rule", (0, 1, 1)))
        self.assertEqual(guideline_key("D 4.1"), ("Dir", (4, 1)))
        self.assertIsNone(guideline_key(""))


class TestCategoryStateMachine(unittest.TestCase):

    def test_mandatory_never_relaxed(self):
        self.assertTrue(Category.MANDATORY.can_become(Category.MANDATORY))
        for target in (Category.REQUIRED, Category.ADVISORY, Category.DISAPPLIED):
            self.assertFalse(Category.MANDATORY.can_become(target))

    def test_required_and_advisory_move_freely(self):
        for source in (Category.REQUIRED, Category.ADVISORY):
            for target in Category:
                self.assertTrue(source.can_become(target))

    def test_parse(self):
        self.assertIs(Category.parse(" disapplied "), Category.DISAPPLIED)
        with self.assertRaises(ValueError):
            Category.parse("optional")


class TestCatalogueValidation(unittest.TestCase):

    def test_duplicate_rejected(self):
        with self.assertRaises(ValueError):
            Catalogue("X", [
                Guideline("Rule 1.1", Category.REQUIRED, "a"),
                Guideline("1.1", Category.ADVISORY, "b"),
            ])

    def test_disapplied_default_rejected(self):
        with self.assertRaises(ValueError):
            Catalogue("X", [Guideline("Rule 1.1", Category.DISAPPLIED, "a")])


class TestExplanation(unittest.TestCase):

    def test_explain_known(self):
        cat = RulesetModel.default().catalogue(MISRA_C_2012)
        text = format_guideline_explanation(cat, "9.1")
        self.assertIn("Rule 9.1", text)
        self.assertIn("Mandatory", text)
        self.assertIn("never be re-categorized", text)

    def test_explain_unknown(self):
        cat = RulesetModel.default().catalogue(MISRA_C_2012)
        self.assertIn("Unknown guideline", format_guideline_explanation(cat, "Rule 99.1"))


if __name__ == "__main__":
    unittest.main()
