"""
MCP Server Tests — the tool functions called directly, as the MCP client
would invoke them.
"""

import json
import os
import shutil
import sys
import tempfile
import unittest

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, PROJECT_ROOT)

import gcs_server


class TestCatalogueTools(unittest.TestCase):

    def test_list_warning_parsers(self):
        text = gcs_server.list_warning_parsers()
        for name in ("Cppcheck", "PC-lint Plus", "Axivion"):
            self.assertIn(f"| {name} |", text)

    def test_list_rule_sets(self):
        text = gcs_server.list_rule_sets()
        self.assertIn("| MISRA C:2012 | 159 | 10 | 110 | 39 |", text)
        self.assertIn("| MISRA C:2004 | 142 | 0 | 122 | 20 |", text)

    def test_check_compatibility(self):
        self.assertIn("is supported by Cppcheck", gcs_server.check_compatibility("cppcheck", "MISRA C:2012"))
        self.assertTrue(gcs_server.check_compatibility("Cppcheck", "MISRA C:2004").startswith("Error:"))
        self.assertTrue(gcs_server.check_compatibility("Coverity", "MISRA C:2012").startswith("Error:"))

    def test_mcp_pinned_below_v2(self):
        """FastMCP lives at mcp.server.fastmcp only in the 1.x series."""
        with open(os.path.join(PROJECT_ROOT, "pyproject.toml"), encoding="utf-8") as f:
            self.assertIn('"mcp>=1.2,<2"', f.read())

    def test_explain_guideline(self):
        self.assertIn("Rule 5-0-3", gcs_server.explain_guideline("5-0-3", "MISRA C++:2008"))
        self.assertTrue(gcs_server.explain_guideline("1.1", "MISRA C:1990").startswith("Error:"))


class TestReportTools(unittest.TestCase):

    def setUp(self):
        self.ws = tempfile.mkdtemp(prefix="gcs_srv_")
        self.write("cppcheck.txt",
                   "src/main.c:42:5: style: misra violation [misra-c2012-10.4]\n"
                   "not a diagnostic\n")
        self.write("files.txt", "src/main.c\n")
        self.write("plan.grp", "Rule 15.5 Disapplied\n")

    def tearDown(self):
        shutil.rmtree(self.ws, ignore_errors=True)

    def write(self, name, content):
        with open(os.path.join(self.ws, name), "w", encoding="utf-8") as f:
            f.write(content)

    def test_generate_gcs(self):
        text = gcs_server.generate_gcs(
            "Cppcheck", "MISRA C:2012", "cppcheck.txt", "files.txt", self.ws,
            grp_file="plan.grp", project_name="demo",
        )
        self.assertIn("## demo", text)
        self.assertIn("| Rule 10.4 |", text)
        self.assertIn("Advisory → Disapplied", text)
        self.assertIn("### Notes", text)
        self.assertIn("**Error code**: 4", text)

    def test_generate_gcs_bad_workspace(self):
        text = gcs_server.generate_gcs("Cppcheck", "MISRA C:2012", "w", "f",
                                       os.path.join(self.ws, "missing"))
        self.assertTrue(text.startswith("Error: Workspace root not found"))

    def test_generate_gcs_bad_tag_pattern(self):
        text = gcs_server.generate_gcs("Cppcheck", "MISRA C:2012", "cppcheck.txt", "files.txt",
                                       self.ws, tag_pattern="(")
        self.assertTrue(text.startswith("Error: Invalid tag pattern"))

    def test_export_report(self):
        gcs_server.generate_gcs("Cppcheck", "MISRA C:2012", "cppcheck.txt", "files.txt", self.ws)
        out = os.path.join(self.ws, "gcs.json")
        msg = gcs_server.export_report(out)
        self.assertIn("159 guidelines", msg)
        with open(out, encoding="utf-8") as f:
            data = json.load(f)
        self.assertFalse(data["report"]["compliant"])
        self.assertEqual(len(data["errors"]), 1)

    def test_run_gcs_job(self):
        config = os.path.join(self.ws, "job.json")
        with open(config, "w", encoding="utf-8") as f:
            json.dump({
                "warnings_file": "cppcheck.txt",
                "source_list_file": "files.txt",
                "warning_parser": "Cppcheck",
                "rule_set": "MISRA C:2012",
                "fail_on_incompliance": True,
            }, f)
        text = gcs_server.run_gcs_job(config, self.ws)
        self.assertTrue(text.startswith("Job **FAILED**."))
        self.assertIn("not MISRA compliant", text)

    def test_run_gcs_job_unwritable_log_file(self):
        config = os.path.join(self.ws, "job.json")
        with open(config, "w", encoding="utf-8") as f:
            json.dump({
                "warnings_file": "cppcheck.txt",
                "source_list_file": "files.txt",
                "warning_parser": "Cppcheck",
                "rule_set": "MISRA C:2012",
                "log_file": "nodir/gcs.log",
            }, f)
        text = gcs_server.run_gcs_job(config, self.ws)
        self.assertTrue(text.startswith("Job **FAILED**."))
        self.assertIn("Cannot open log file", text)

    def test_generate_gcs_relative_workspace(self):
        real_ws = os.path.realpath(self.ws)
        self.write("files.txt", f"{real_ws}/src/main.c\n")
        cwd = os.getcwd()
        os.chdir(os.path.dirname(real_ws))
        try:
            gcs_server.generate_gcs("Cppcheck", "MISRA C:2012", "cppcheck.txt", "files.txt",
                                    os.path.basename(real_ws))
        finally:
            os.chdir(cwd)
        report = gcs_server.last_result.report
        self.assertEqual(report.source_files, ("src/main.c",))
        self.assertEqual(report.violations[0].file_path, "src/main.c")

    def test_run_gcs_job_bad_config(self):
        text = gcs_server.run_gcs_job(os.path.join(self.ws, "absent.json"), self.ws)
        self.assertTrue(text.startswith("Error: Invalid job configuration"))


if __name__ == "__main__":
    unittest.main()
