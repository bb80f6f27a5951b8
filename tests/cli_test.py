#!/usr/bin/env python
import io
import os
import subprocess
import sys
import unittest
from contextlib import redirect_stdout

from regex_matcher import main, split_arguments, USAGE

REPO_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
SCRIPT = os.path.join(REPO_ROOT, "regex_matcher.py")

class MainTest(unittest.TestCase):
    def run_main(self, argv):
        buf = io.StringIO()
        with redirect_stdout(buf):
            main(argv)
        return buf.getvalue()

    def test_match(self):
        self.assertEqual(
            self.run_main(["ab*c", "abbbc"]),
            "The input text [ abbbc ] does match the pattern [ ab*c ]\n"
        )

    def test_no_match(self):
        self.assertEqual(
            self.run_main(["^abc", "xabc"]),
            "The input text [ xabc ] does not match the pattern [ ^abc ]\n"
        )

    def test_empty_pattern(self):
        self.assertEqual(
            self.run_main(["", "anything"]),
            "The input text [ anything ] does match the pattern [  ]\n"
        )

    def test_missing_arguments_print_usage(self):
        self.assertEqual(self.run_main([]), USAGE + "\n")
        self.assertEqual(self.run_main(["abc"]), USAGE + "\n")

    def test_extra_operands_are_ignored(self):
        self.assertEqual(
            self.run_main(["abc", "xxabc", "extra"]),
            "The input text [ xxabc ] does match the pattern [ abc ]\n"
        )

    def test_operands_starting_with_dash(self):
        self.assertEqual(
            self.run_main(["-b*", "a-bb"]),
            "The input text [ a-bb ] does match the pattern [ -b* ]\n"
        )
        self.assertEqual(
            self.run_main(["x", "-x"]),
            "The input text [ -x ] does match the pattern [ x ]\n"
        )

    def test_double_dash_ends_options(self):
        self.assertEqual(
            self.run_main(["--", "-v", "-v"]),
            "The input text [ -v ] does match the pattern [ -v ]\n"
        )

    def test_options_after_pattern_are_operands(self):
        self.assertEqual(
            self.run_main(["abc", "--verbose"]),
            "The input text [ --verbose ] does not match the pattern [ abc ]\n"
        )


class SplitArgumentsTest(unittest.TestCase):
    def test_leading_options(self):
        self.assertEqual(split_arguments(["-v", "a", "b"]), (["-v"], ["a", "b"]))
        self.assertEqual(split_arguments(["a", "-v"]), ([], ["a", "-v"]))

    def test_double_dash(self):
        self.assertEqual(split_arguments(["--verbose", "--", "--", "x"]), (["--verbose"], ["--", "x"]))
        self.assertEqual(split_arguments([]), ([], []))


class ScriptTest(unittest.TestCase):
    def run_script(self, *args):
        cmd = [sys.executable, SCRIPT, *args]
        result = subprocess.run(cmd, stdout=subprocess.PIPE, stderr=subprocess.PIPE, text=True, cwd=REPO_ROOT)
        return result

    def test_match_and_no_match_share_exit_code(self):
        matched = self.run_script("abc$", "xxabc")
        unmatched = self.run_script("abc$", "abcxx")
        self.assertEqual(matched.returncode, 0)
        self.assertEqual(unmatched.returncode, 0)
        self.assertEqual(matched.stdout.strip(), "The input text [ xxabc ] does match the pattern [ abc$ ]")
        self.assertEqual(unmatched.stdout.strip(), "The input text [ abcxx ] does not match the pattern [ abc$ ]")

    def test_usage(self):
        result = self.run_script("abc")
        self.assertEqual(result.returncode, 0)
        self.assertEqual(result.stdout.strip(), USAGE)

    def test_extra_argument_and_dash_prefixed_operands(self):
        result = self.run_script("abc", "xxabc", "extra")
        self.assertEqual(result.returncode, 0)
        self.assertEqual(result.stdout.strip(), "The input text [ xxabc ] does match the pattern [ abc ]")
        result = self.run_script("-b*", "a-bb")
        self.assertEqual(result.returncode, 0)
        self.assertEqual(result.stdout.strip(), "The input text [ a-bb ] does match the pattern [ -b* ]")

    def test_verbose_logs_to_stderr(self):
        result = self.run_script("--verbose", "a$b", "xa$b")
        self.assertEqual(result.stdout.strip(), "The input text [ xa$b ] does match the pattern [ a$b ]")
        self.assertIn("is matched literally", result.stderr)


if __name__ == "__main__":
    unittest.main()
