"""
Unit tests for configuration.
"""

import unittest
from argparse import Namespace
from config import PluginConfig


class TestPluginConfig(unittest.TestCase):
    """Test PluginConfig data model."""

    def test_config_defaults(self):
        """Test default configuration values."""
        config = PluginConfig()
        self.assertIsNone(config.region)
        self.assertIsNone(config.profile)
        self.assertIsNone(config.function_name)
        self.assertEqual(config.max_retries, 5)
        self.assertEqual(config.timeout_s, 60)
        self.assertFalse(config.verbose)
        self.assertEqual(config.log_file, "lambda-tasks.log")

    def test_config_from_args(self):
        """Test creating config from command-line arguments."""
        args = Namespace(
            region="eu-west-1",
            profile="deploy",
            default_function_name="f1",
            max_retries=3,
            request_timeout=30,
            verbose=True,
            log_file="deploy.log",
        )
        config = PluginConfig.from_args(args)

        self.assertEqual(config.region, "eu-west-1")
        self.assertEqual(config.profile, "deploy")
        self.assertEqual(config.function_name, "f1")
        self.assertEqual(config.max_retries, 3)
        self.assertEqual(config.timeout_s, 30)
        self.assertTrue(config.verbose)
        self.assertEqual(config.log_file, "deploy.log")


if __name__ == "__main__":
    unittest.main()
