# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
External services used to generate remediation suggestions.
"""

from html_accessibility_checker.remediate.services.bedrock_client import BedrockClient

__all__ = ["BedrockClient"]
