#!/usr/bin/env python3

import unittest
import os
from unittest.mock import patch
from gjf_action.config import Config, ConfigurationError, get_config, reset_config
from gjf_action.git_handler import DEFAULT_SERVER_URL


class TestConfigIntegration(unittest.TestCase):
    """Integration tests for reading action inputs and run context."""

    def setUp(self):
        """Set up test environment before each test."""
        # Store original environment to restore later
        self.original_env = os.environ.copy()

        self.env_vars = {
            'HOME': '/home/runner',
            'GITHUB_WORKSPACE': '/tmp',
            'GITHUB_ACTOR': 'octocat',
            'GITHUB_REPOSITORY': 'octocat/hello-world',
            'INPUT_FILES': '**/*.java',
        }
        for name in list(os.environ):
            if name.startswith('INPUT_') or name in ('RUNNER_DEBUG', 'DEBUG_MODE'):
                del os.environ[name]
        os.environ.update(self.env_vars)
        reset_config()

    def tearDown(self):
        """Clean up after each test."""
        # Restore original environment
        os.environ.clear()
        os.environ.update(self.original_env)
        reset_config()

    def test_defaults(self):
        config = get_config(testing=True)

        self.assertEqual(config.ARGS, [])
        self.assertEqual(config.FILES, '**/*.java')
        self.assertIsNone(config.FILES_EXCLUDED)
        self.assertIsNone(config.RELEASE_NAME)
        self.assertFalse(config.SKIP_COMMIT)
        self.assertIsNone(config.COMMIT_MESSAGE)
        self.assertIsNone(config.GITHUB_TOKEN)
        self.assertEqual(config.GITHUB_ACTOR, 'octocat')
        self.assertEqual(config.GITHUB_REPOSITORY, 'octocat/hello-world')
        self.assertEqual(config.GITHUB_SERVER_URL, 'https://github.com')
        self.assertEqual(config.EXECUTABLE_PATH, os.path.join('/home/runner', 'google-java-format.jar'))

    def test_server_url_default_matches_push_default(self):
        os.environ.pop('GITHUB_SERVER_URL', None)

        config = get_config(testing=True)

        self.assertEqual(config.GITHUB_SERVER_URL, DEFAULT_SERVER_URL)

    def test_args_are_split_on_whitespace(self):
        os.environ['INPUT_ARGS'] = '--replace  --skip-javadoc-formatting'

        config = get_config(testing=True)

        self.assertEqual(config.ARGS, ['--replace', '--skip-javadoc-formatting'])

    def test_release_name_alternatives(self):
        os.environ['INPUT_VERSION'] = '1.7'
        self.assertEqual(Config(testing=True).RELEASE_NAME, '1.7')

        os.environ['INPUT_RELEASE-NAME'] = 'v1.24.0'
        self.assertEqual(Config(testing=True).RELEASE_NAME, 'v1.24.0')

    def test_skip_commit_is_case_insensitive(self):
        os.environ['INPUT_SKIPCOMMIT'] = 'TRUE'
        self.assertTrue(Config(testing=True).SKIP_COMMIT)

        os.environ['INPUT_SKIP-COMMIT'] = 'false'
        self.assertFalse(Config(testing=True).SKIP_COMMIT)

    def test_commit_message_and_token(self):
        os.environ['INPUT_COMMIT-MESSAGE'] = 'Format Java sources'
        os.environ['INPUT_GITHUBTOKEN'] = 'mock-token'

        config = Config(testing=True)

        self.assertEqual(config.COMMIT_MESSAGE, 'Format Java sources')
        self.assertEqual(config.GITHUB_TOKEN, 'mock-token')

    def test_files_is_required(self):
        del os.environ['INPUT_FILES']

        with self.assertRaises(ConfigurationError) as ctx:
            Config()

        self.assertIn('files', str(ctx.exception))

    def test_missing_files_exits(self):
        del os.environ['INPUT_FILES']

        with patch('sys.exit') as mock_exit:
            get_config()

        mock_exit.assert_called_once_with(1)

    def test_executable_falls_back_to_userprofile(self):
        del os.environ['HOME']
        os.environ['USERPROFILE'] = 'C:\\Users\\runner'

        config = Config(testing=True)

        self.assertEqual(config.EXECUTABLE_PATH, os.path.join('C:\\Users\\runner', 'google-java-format.jar'))

    def test_runner_debug_logs_settings(self):
        os.environ['RUNNER_DEBUG'] = '1'

        with patch('gjf_action.config._log_config_message') as mock_log:
            config = Config()

        self.assertTrue(config.DEBUG_MODE)
        logged = [c.args[0] for c in mock_log.call_args_list]
        self.assertIn('::debug::Files: **/*.java', logged)
        self.assertIn('::debug::Authenticated: False', logged)


if __name__ == '__main__':
    unittest.main()
