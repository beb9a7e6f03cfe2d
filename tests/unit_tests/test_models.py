"""
Unit tests for data models.
"""

import unittest

from exceptions import ConfigurationError
from models import (
    DEFAULT_RUNTIME,
    FunctionConfigOverrides,
    LookupResult,
    RemoteAliasConfig,
    RemoteFunctionConfig,
    S3ObjectRef,
    VpcConfig,
)


class TestS3ObjectRef(unittest.TestCase):
    """Test S3ObjectRef validation."""

    def test_valid_reference(self):
        """Test bucket and key are enough; object version is optional."""
        S3ObjectRef(bucket="builds", key="f1.zip").validate()

    def test_missing_bucket_and_key(self):
        """Test both missing sub-fields are reported."""
        with self.assertRaises(ConfigurationError) as ctx:
            S3ObjectRef(object_version="v1").validate()
        self.assertEqual(ctx.exception.fields, ["s3_file.bucket", "s3_file.key"])
        self.assertIn("are required", str(ctx.exception))


class TestVpcConfig(unittest.TestCase):
    """Test VpcConfig conversion."""

    def test_from_response_ignores_vpc_id(self):
        vpc = VpcConfig.from_response(
            {"SubnetIds": ["s-1"], "SecurityGroupIds": ["sg-1"], "VpcId": "vpc-1"}
        )
        self.assertEqual(
            vpc.to_request(), {"SubnetIds": ["s-1"], "SecurityGroupIds": ["sg-1"]}
        )

    def test_from_response_none(self):
        self.assertIsNone(VpcConfig.from_response(None))


class TestRemoteConfigs(unittest.TestCase):
    """Test remote snapshot parsing."""

    def test_alias_from_response(self):
        alias = RemoteAliasConfig.from_response(
            {"Name": "live", "FunctionVersion": "3", "Description": "d1"}
        )
        self.assertEqual(alias.name, "live")
        self.assertEqual(alias.function_version, "3")
        self.assertIsNone(alias.alias_arn)

    def test_function_without_environment(self):
        """Test an absent Environment block stays None (not an empty mapping)."""
        config = RemoteFunctionConfig.from_response({"FunctionName": "f1"})
        self.assertIsNone(config.environment)
        self.assertIsNone(config.vpc_config)

    def test_default_configuration(self):
        config = RemoteFunctionConfig.default()
        self.assertEqual(config.runtime, DEFAULT_RUNTIME)
        self.assertIsNone(config.handler)


class TestOverridesAndLookup(unittest.TestCase):
    """Test FunctionConfigOverrides and LookupResult."""

    def test_overrides_default_to_unset(self):
        overrides = FunctionConfigOverrides()
        self.assertIsNone(overrides.environment)
        self.assertIsNone(overrides.publish)

    def test_lookup_variants(self):
        found = LookupResult.of("value")
        missing = LookupResult.not_found("gone")

        self.assertTrue(found.found)
        self.assertEqual(found.value, "value")
        self.assertFalse(missing.found)
        self.assertEqual(missing.message, "gone")


if __name__ == "__main__":
    unittest.main()
