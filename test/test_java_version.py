"""
Tests for Java version detection and formatter arguments.
"""

import unittest
from unittest.mock import MagicMock

from gjf_action.command_executor import CommandResult
from gjf_action.errors import CommandFailed, InvalidVersionInput, VersionParseError
from gjf_action.java_version import build_gjf_args, get_java_version, parse_java_version

EXPORTS_JDK_11 = [
    '--add-exports', 'jdk.compiler/com.sun.tools.javac.api=ALL-UNNAMED',
    '--add-exports', 'jdk.compiler/com.sun.tools.javac.file=ALL-UNNAMED',
    '--add-exports', 'jdk.compiler/com.sun.tools.javac.parser=ALL-UNNAMED',
    '--add-exports', 'jdk.compiler/com.sun.tools.javac.tree=ALL-UNNAMED',
    '--add-exports', 'jdk.compiler/com.sun.tools.javac.util=ALL-UNNAMED',
]


class TestGetJavaVersion(unittest.TestCase):
    """Test detecting the JDK version from `java -version`."""

    def setUp(self):
        self.executor = MagicMock()

    def assert_called_java_version(self):
        self.executor.assert_called_with('java', ['-version'], silent=True, ignore_return_code=False)

    def test_invalid_return_code(self):
        error = CommandFailed("Command 'java -version' failed with exit code 1", command='java -version', exit_code=1)
        self.executor.side_effect = error

        with self.assertRaises(CommandFailed) as ctx:
            get_java_version(self.executor)

        self.assertIs(ctx.exception, error)
        self.assert_called_java_version()

    def test_no_output(self):
        self.executor.return_value = CommandResult(exit_code=0, std_out='', std_err='')

        with self.assertRaises(VersionParseError) as ctx:
            get_java_version(self.executor)

        self.assertEqual(str(ctx.exception), "Cannot find Java version number")
        self.assert_called_java_version()

    def test_version_jdk_8(self):
        self.executor.return_value = CommandResult(exit_code=0, std_out='', std_err='java version "1.8.0_211"')

        self.assertEqual(get_java_version(self.executor), 8)
        self.assert_called_java_version()

    def test_version_after_jdk_8(self):
        self.executor.return_value = CommandResult(
            exit_code=0, std_out='', std_err='openjdk version "21.0.6" 2025-01-21'
        )

        self.assertEqual(get_java_version(self.executor), 21)
        self.assert_called_java_version()

    def test_version_is_read_from_stderr_only(self):
        self.executor.return_value = CommandResult(exit_code=0, std_out='openjdk version "17.0.1"', std_err='')

        with self.assertRaises(VersionParseError):
            get_java_version(self.executor)


class TestParseJavaVersion(unittest.TestCase):
    """Test parsing version banners."""

    def test_full_banner_uses_first_line(self):
        banner = (
            'openjdk version "17.0.9" 2023-10-17\n'
            'OpenJDK Runtime Environment Temurin-17.0.9+9 (build 17.0.9+9)\n'
            'OpenJDK 64-Bit Server VM Temurin-17.0.9+9 (build 17.0.9+9, mixed mode, sharing)\n'
        )
        self.assertEqual(parse_java_version(banner), 17)

    def test_version_without_minor(self):
        self.assertEqual(parse_java_version('openjdk version "11" 2018-09-25'), 11)

    def test_legacy_jdk_7(self):
        self.assertEqual(parse_java_version('java version "1.7.0_80"'), 7)

    def test_no_digits_on_first_line(self):
        with self.assertRaises(VersionParseError):
            parse_java_version('Error: could not find java\nversion 17')

    def test_version_without_digits(self):
        with self.assertRaises(VersionParseError):
            parse_java_version('openjdk version ".x"')

    def test_error_message_with_periods(self):
        with self.assertRaises(VersionParseError) as ctx:
            parse_java_version("Error: Unrecognized option. Abort.")

        self.assertEqual(str(ctx.exception), "Cannot find Java version number")

    def test_major_version_missing_after_legacy_prefix(self):
        with self.assertRaises(InvalidVersionInput) as ctx:
            parse_java_version('java version "1."')

        self.assertEqual(ctx.exception.raw_version, '1.')
        self.assertEqual(str(ctx.exception), "Cannot parse Java version number from '1.'")

    def test_major_version_zero(self):
        with self.assertRaises(InvalidVersionInput):
            parse_java_version('java version "0.9"')


class TestBuildGjfArgs(unittest.TestCase):
    """Test assembling the formatter invocation."""

    def test_jdk_8_has_no_exports(self):
        self.assertEqual(build_gjf_args(8, 'x.jar', ['a', 'b']), ['-jar', 'x.jar', 'a', 'b'])

    def test_jdk_11_exports_javac_modules(self):
        self.assertEqual(
            build_gjf_args(11, 'x.jar', ['a', 'b', 'c']),
            EXPORTS_JDK_11 + ['-jar', 'x.jar', 'a', 'b', 'c']
        )

    def test_jdk_21_exports_javac_modules(self):
        self.assertEqual(build_gjf_args(21, 'gjf.jar'), EXPORTS_JDK_11 + ['-jar', 'gjf.jar'])

    def test_jdk_10_has_no_exports(self):
        self.assertEqual(build_gjf_args(10, 'x.jar', ['--version']), ['-jar', 'x.jar', '--version'])


if __name__ == '__main__':
    unittest.main()
