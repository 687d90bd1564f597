"""
Tests for the Bedrock text generation client.
"""

from unittest.mock import MagicMock, patch

import pytest
from botocore.exceptions import ClientError, EndpointConnectionError

from html_accessibility_checker.remediate.services.bedrock_client import (
    SYSTEM_PROMPT,
    BedrockClient,
)
from html_accessibility_checker.utils.logging_helper import FixGenerationError


def _converse_response(text):
    return {"output": {"message": {"role": "assistant", "content": [{"text": text}]}}}


class TestBedrockClient:
    def test_generate_text(self):
        runtime = MagicMock()
        runtime.converse.return_value = _converse_response("Add an alt attribute.")
        client = BedrockClient(model_id="test-model", client=runtime)

        assert client.generate_text("Suggest a fix", max_tokens=100) == "Add an alt attribute."

        runtime.converse.assert_called_once_with(
            modelId="test-model",
            system=[{"text": SYSTEM_PROMPT}],
            messages=[{"role": "user", "content": [{"text": "Suggest a fix"}]}],
            inferenceConfig={"maxTokens": 100},
        )

    def test_system_prompt(self):
        assert SYSTEM_PROMPT == "You are an accessibility expert."

    def test_client_error(self):
        runtime = MagicMock()
        runtime.converse.side_effect = ClientError(
            {"Error": {"Code": "ThrottlingException", "Message": "Rate exceeded"}},
            "Converse",
        )
        client = BedrockClient(client=runtime)

        with pytest.raises(FixGenerationError):
            client.generate_text("prompt")

    def test_connection_error(self):
        runtime = MagicMock()
        runtime.converse.side_effect = EndpointConnectionError(endpoint_url="https://bedrock")
        client = BedrockClient(client=runtime)

        with pytest.raises(FixGenerationError):
            client.generate_text("prompt")

    @pytest.mark.parametrize(
        "response",
        [{}, {"output": {"message": {"content": []}}}, {"output": None}],
    )
    def test_malformed_response(self, response):
        runtime = MagicMock()
        runtime.converse.return_value = response
        client = BedrockClient(client=runtime)

        with pytest.raises(FixGenerationError):
            client.generate_text("prompt")

    def test_creates_runtime_client_from_profile(self):
        with patch(
            "html_accessibility_checker.remediate.services.bedrock_client.boto3.Session"
        ) as session_class:
            client = BedrockClient(profile="dev", read_timeout=5.0)

        session_class.assert_called_once_with(profile_name="dev")
        args, kwargs = session_class.return_value.client.call_args
        assert args == ("bedrock-runtime",)
        assert kwargs["config"].read_timeout == 5.0
        assert client.client is session_class.return_value.client.return_value
