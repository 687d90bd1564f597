# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Bedrock client for AI text generation.

This module provides a client for generating remediation text with AWS Bedrock.
"""

from typing import Optional

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from html_accessibility_checker.utils.logging_helper import (
    FixGenerationError,
    setup_logger,
)

# Set up module-level logger
logger = setup_logger(__name__)

SYSTEM_PROMPT = "You are an accessibility expert."


class BedrockClient:
    """Client for interacting with AWS Bedrock for text generation.

    Attributes:
        model_id: The Bedrock model ID to use
        profile: AWS credentials profile name
        client: Boto3 Bedrock runtime client
    """

    def __init__(
        self,
        model_id: str = "us.amazon.nova-lite-v1:0",
        profile: Optional[str] = None,
        read_timeout: float = 30.0,
        client=None,
    ):
        """
        Initialize the Bedrock client.

        Args:
            model_id: The ID of the Bedrock model to use
            profile: AWS profile name to use for authentication
            read_timeout: Socket read timeout in seconds for each call
            client: Pre-built bedrock-runtime client to use instead of creating one
        """
        self.model_id = model_id
        self.profile = profile

        if client is not None:
            self.client = client
            return

        if profile:
            try:
                session = boto3.Session(profile_name=profile)
                logger.debug(f"Using AWS profile: {profile}")
            except BotoCoreError as profile_error:
                logger.warning(
                    f"Couldn't use AWS profile '{profile}', falling back to default credentials: {profile_error}"
                )
                session = boto3.Session()
        else:
            session = boto3.Session()

        self.client = session.client(
            "bedrock-runtime",
            config=Config(read_timeout=read_timeout, retries={"max_attempts": 2}),
        )
        logger.debug(
            f"Initialized Bedrock client with model: {model_id}, profile: {profile}"
        )

    def generate_text(
        self, prompt: str, system_prompt: str = SYSTEM_PROMPT, max_tokens: int = 500
    ) -> str:
        """
        Generate text using the Bedrock model.

        Args:
            prompt: The prompt to send to the model
            system_prompt: System instruction for the model
            max_tokens: Maximum number of tokens to generate

        Returns:
            The generated text

        Raises:
            FixGenerationError: If text generation fails or returns no content
        """
        try:
            response = self.client.converse(
                modelId=self.model_id,
                system=[{"text": system_prompt}],
                messages=[
                    {
                        "role": "user",
                        "content": [
                            {
                                "text": prompt,
                            }
                        ],
                    }
                ],
                inferenceConfig={
                    "maxTokens": max_tokens,
                },
            )
        except (BotoCoreError, ClientError) as e:
            logger.warning(f"Error generating text with Bedrock: {e}")
            raise FixGenerationError(
                f"Failed to generate text with Bedrock: {str(e)}"
            ) from e

        try:
            generated_text = response["output"]["message"]["content"][0]["text"]
        except (KeyError, IndexError, TypeError) as e:
            logger.warning("No content in Bedrock response")
            raise FixGenerationError("No content in Bedrock response") from e

        return generated_text
