"""
Job Runner Tests — workspace file reading, env expansion, fail policy,
log file capture and config validation.
"""

import json
import os
import shutil
import sys
import tempfile
import unittest

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, PROJECT_ROOT)

from misra_gcs.errors import InvalidJobConfigError
from misra_gcs.job import GcsJobConfig, expand_env, load_job_config, read_input, run_job
from misra_gcs.models import IngestionErrorKind

VIOLATION = "src/main.c:42:5: style: misra violation [misra-c2012-10.4]"


class WorkspaceTestCase(unittest.TestCase):

    def setUp(self):
        self.ws = tempfile.mkdtemp(prefix="gcs_ws_")

    def tearDown(self):
        shutil.rmtree(self.ws, ignore_errors=True)

    def write(self, name, content):
        path = os.path.join(self.ws, name)
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(content)
        return path

    def config(self, **kw):
        base = dict(
            warnings_file="cppcheck.txt",
            source_list_file="files.txt",
            warning_parser="Cppcheck",
            rule_set="MISRA C:2012",
        )
        base.update(kw)
        return GcsJobConfig(**base)


class TestReadInput(WorkspaceTestCase):

    def test_relative_to_workspace(self):
        self.write("in/a.txt", "one\ntwo\n")
        text = read_input(self.ws, "in/a.txt")
        self.assertEqual(text.lines, ("one", "two"))
        self.assertEqual(text.label, "in/a.txt")

    def test_line_endings_keep_numbering(self):
        self.write("a.txt", "one\r\n\r\nthree\rfour")
        self.assertEqual(read_input(self.ws, "a.txt").lines, ("one", "", "three", "four"))

    def test_missing_file(self):
        text = read_input(self.ws, "nope.txt", label="warnings")
        self.assertTrue(text.missing)
        self.assertEqual(text.label, "warnings")
        self.assertIn("nope.txt", text.error)

    def test_empty_file(self):
        self.write("empty.txt", "")
        text = read_input(self.ws, "empty.txt")
        self.assertFalse(text.missing)
        self.assertEqual(text.lines, ())


class TestExpandEnv(unittest.TestCase):

    def test_expansion(self):
        env = {"BUILD": "42", "PROJ": "brake"}
        self.assertEqual(expand_env("$PROJ-${BUILD}", env), "brake-42")

    def test_unknown_left_alone(self):
        self.assertEqual(expand_env("v$UNSET", {}), "v$UNSET")


class TestRunJob(WorkspaceTestCase):

    def test_compliant_job(self):
        self.write("cppcheck.txt", "")
        self.write("files.txt", "src/main.c\n")
        outcome = run_job(self.config(fail_on_error=True, fail_on_incompliance=True), self.ws, env={})
        self.assertFalse(outcome.failed)
        self.assertTrue(outcome.result.is_compliant)
        self.assertEqual(outcome.result.error_code, 0)

    def test_env_in_project_fields(self):
        self.write("cppcheck.txt", "")
        self.write("files.txt", "src/main.c\n")
        outcome = run_job(
            self.config(project_name="$PROJ", software_version="1.${BUILD}"),
            self.ws, env={"PROJ": "brake", "BUILD": "7"},
        )
        self.assertEqual(outcome.result.report.project_name, "brake")
        self.assertEqual(outcome.result.report.software_version, "1.7")

    def test_incompliance_policy(self):
        self.write("cppcheck.txt", VIOLATION + "\n")
        self.write("files.txt", "src/main.c\n")

        outcome = run_job(self.config(), self.ws, env={})
        self.assertFalse(outcome.failed)
        self.assertFalse(outcome.result.is_compliant)

        outcome = run_job(self.config(fail_on_incompliance=True), self.ws, env={})
        self.assertTrue(outcome.failed)
        self.assertIn("Job failed because the code is not MISRA compliant", outcome.messages)

    def test_missing_file_policy(self):
        self.write("files.txt", "src/main.c\n")

        outcome = run_job(self.config(), self.ws, env={})
        self.assertFalse(outcome.failed)
        self.assertEqual(outcome.result.error_code, IngestionErrorKind.MISSING_INPUT)

        outcome = run_job(self.config(fail_on_error=True), self.ws, env={})
        self.assertTrue(outcome.failed)
        self.assertIn("Job failed because an error occurred during creation of the GCS", outcome.messages)

    def test_grp_file_used(self):
        self.write("cppcheck.txt", VIOLATION + "\n")
        self.write("files.txt", "src/main.c\n")
        self.write("plan.grp", "Rule 10.4 Disapplied\n")
        outcome = run_job(self.config(grp_file="plan.grp", fail_on_incompliance=True), self.ws, env={})
        self.assertFalse(outcome.failed)
        self.assertTrue(outcome.result.is_compliant)

    def test_incompatible_fails_before_reading(self):
        outcome = run_job(self.config(rule_set="MISRA C:2004"), self.ws, env={})
        self.assertTrue(outcome.failed)
        self.assertIsNone(outcome.result)
        self.assertTrue(outcome.messages[0].endswith("Job failed."))

    def test_relative_workspace_root(self):
        """Absolute entries and a relative root still give relative paths."""
        real_ws = os.path.realpath(self.ws)
        self.write("cppcheck.txt", f"{real_ws}/src/a.c:3:1: style: x [misra-c2012-15.5]\n")
        self.write("files.txt", f"{real_ws}/src/a.c\nsrc/b.c\n")
        cwd = os.getcwd()
        os.chdir(os.path.dirname(real_ws))
        try:
            outcome = run_job(self.config(), os.path.basename(real_ws), env={})
        finally:
            os.chdir(cwd)
        report = outcome.result.report
        self.assertEqual(report.source_files, ("src/a.c", "src/b.c"))
        self.assertEqual(report.violations[0].file_path, "src/a.c")

    def test_unwritable_log_file(self):
        self.write("cppcheck.txt", "")
        self.write("files.txt", "src/main.c\n")
        outcome = run_job(self.config(log_file="nodir/gcs.log"), self.ws, env={})
        self.assertTrue(outcome.failed)
        self.assertIsNone(outcome.result)
        self.assertTrue(outcome.messages[0].startswith("Cannot open log file"))

    def test_log_file_written(self):
        self.write("files.txt", "src/main.c\n")
        run_job(self.config(log_file="gcs.log"), self.ws, env={})
        with open(os.path.join(self.ws, "gcs.log"), encoding="utf-8") as f:
            log = f.read()
        self.assertIn("Input could not be read", log)
        self.assertIn("GCS Cppcheck / MISRA C:2012", log)


class TestJobConfig(WorkspaceTestCase):

    def test_load(self):
        path = self.write("job.json", json.dumps({
            "warnings_file": "w.txt",
            "source_list_file": "f.txt",
            "warning_parser": "PC-lint Plus",
            "rule_set": "MISRA C:2004",
            "fail_on_error": True,
        }))
        config = load_job_config(path)
        self.assertEqual(config.warning_parser, "PC-lint Plus")
        self.assertTrue(config.fail_on_error)
        self.assertFalse(config.fail_on_incompliance)
        self.assertIsNone(config.grp_file)

    def test_required_fields(self):
        path = self.write("job.json", json.dumps({
            "warnings_file": "w.txt",
            "source_list_file": "",
            "warning_parser": "Cppcheck",
            "rule_set": "MISRA C:2012",
        }))
        with self.assertRaises(InvalidJobConfigError):
            load_job_config(path)

    def test_missing_config(self):
        with self.assertRaises(InvalidJobConfigError):
            load_job_config(os.path.join(self.ws, "absent.json"))


if __name__ == "__main__":
    unittest.main()
