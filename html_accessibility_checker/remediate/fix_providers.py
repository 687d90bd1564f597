# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Fix providers for accessibility issues.

A fix provider turns an issue kind into a suggested remediation string. The
static provider reads the rules table; the generative provider asks a text
generation backend and falls back to a fixed message when the backend fails.
"""

import asyncio
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, Dict, List, Optional, Sequence

from botocore.exceptions import BotoCoreError

from html_accessibility_checker.audit.standards import IssueKind, get_rule
from html_accessibility_checker.remediate.services.bedrock_client import BedrockClient
from html_accessibility_checker.utils.logging_helper import (
    FixGenerationError,
    log_exception,
    setup_logger,
)

# Set up module-level logger
logger = setup_logger(__name__)

FALLBACK_FIX = "No suggested fix available."


def build_fix_prompt(issue_kind: IssueKind) -> str:
    """
    Build the prompt sent to a text generation backend for an issue kind.

    Args:
        issue_kind: The kind of issue to fix

    Returns:
        Prompt text derived from the issue's message
    """
    rule = get_rule(issue_kind)
    return f"Suggest a fix for this accessibility issue: {rule.message}"


class FixProvider:
    """Base class for fix providers."""

    # True when suggest_fix may block on I/O
    suspends = False

    def suggest_fix(self, issue_kind: IssueKind) -> str:
        """
        Suggest a fix for an issue kind.

        This method must be implemented by all subclasses.
        """
        raise NotImplementedError("Subclasses must implement suggest_fix()")

    async def suggest_fix_async(self, issue_kind: IssueKind) -> str:
        """Suggest a fix without blocking the event loop."""
        return self.suggest_fix(issue_kind)

    def close(self) -> None:
        """Release resources held by the provider."""


class StaticFixProvider(FixProvider):
    """Fix provider backed by the static rules table."""

    def suggest_fix(self, issue_kind: IssueKind) -> str:
        return get_rule(issue_kind).fix


class GenerativeFixProvider(FixProvider):
    """
    Fix provider backed by a text generation function.

    Every failure of the generator is logged and replaced by the fallback
    fix, so ``suggest_fix`` never raises.
    """

    suspends = True

    def __init__(
        self,
        text_generator: Callable[[str], str],
        fallback_fix: str = FALLBACK_FIX,
        max_workers: int = 4,
    ):
        """
        Initialize the generative provider.

        Args:
            text_generator: Function taking a prompt and returning generated text
            fallback_fix: Text returned when generation fails
            max_workers: Threads available for concurrent generator calls
        """
        self.text_generator = text_generator
        self.fallback_fix = fallback_fix
        self._executor = ThreadPoolExecutor(
            max_workers=max(1, max_workers), thread_name_prefix="fix-provider"
        )

    def suggest_fix(self, issue_kind: IssueKind) -> str:
        prompt = build_fix_prompt(issue_kind)
        try:
            suggestion = self.text_generator(prompt)
        except Exception as e:
            log_exception(
                logger,
                e,
                f"Error fetching suggested fix for {IssueKind(issue_kind).value}",
                include_traceback=False,
            )
            return self.fallback_fix

        if not isinstance(suggestion, str) or not suggestion.strip():
            logger.warning(
                "Empty suggestion returned for %s, using fallback fix",
                IssueKind(issue_kind).value,
            )
            return self.fallback_fix

        return suggestion.strip()

    async def suggest_fix_async(self, issue_kind: IssueKind) -> str:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(self._executor, self.suggest_fix, issue_kind)

    def close(self) -> None:
        # Do not wait for calls abandoned after a timeout
        self._executor.shutdown(wait=False)


def build_fix_provider(
    options: Optional[Dict[str, Any]] = None, text_generator: Optional[Callable[[str], str]] = None
) -> FixProvider:
    """
    Create the fix provider selected by the options.

    Args:
        options: Resolved options; ``use_generative_fixes`` selects the
            generative provider, remediation options configure it
        text_generator: Generator to use instead of a Bedrock client

    Returns:
        The configured fix provider
    """
    options = options or {}
    if not options.get("use_generative_fixes", False):
        return StaticFixProvider()

    if text_generator is None:
        text_generator = _bedrock_text_generator(options)

    return GenerativeFixProvider(
        text_generator,
        fallback_fix=options.get("fallback_fix", FALLBACK_FIX),
        max_workers=int(options.get("max_concurrency", 4)),
    )


def _bedrock_text_generator(options: Dict[str, Any]) -> Callable[[str], str]:
    """
    Create a text generator backed by a Bedrock client.

    If the client cannot be created (no credentials or region configured),
    the returned generator raises on every call so each fix degrades to the
    fallback text.
    """
    client = None
    try:
        client = BedrockClient(
            model_id=options.get("model_id", "us.amazon.nova-lite-v1:0"),
            profile=options.get("profile"),
        )
    except BotoCoreError as e:
        log_exception(logger, e, "Failed to initialize Bedrock client", include_traceback=False)

    max_tokens = int(options.get("max_tokens", 500))

    def generate(prompt: str) -> str:
        if client is None:
            raise FixGenerationError("Bedrock client is not available")
        return client.generate_text(prompt, max_tokens=max_tokens)

    return generate


async def resolve_fixes(
    issue_kinds: Sequence[IssueKind],
    provider: FixProvider,
    max_concurrency: int = 4,
    timeout: Optional[float] = None,
    fallback_provider: Optional[FixProvider] = None,
) -> List[str]:
    """
    Resolve a fix for every issue kind, concurrently and in order.

    At most ``max_concurrency`` provider calls run at once. Fixes that are not
    resolved within ``timeout`` seconds come from the fallback provider.

    Args:
        issue_kinds: Issue kinds in report order
        provider: Provider used for each fix
        max_concurrency: Maximum number of concurrent provider calls
        timeout: Seconds allowed for the whole resolution, None for no limit
        fallback_provider: Provider for unresolved fixes (static by default)

    Returns:
        Fix strings in the same order as ``issue_kinds``
    """
    if not issue_kinds:
        return []

    fallback_provider = fallback_provider or StaticFixProvider()
    semaphore = asyncio.Semaphore(max(1, max_concurrency))

    async def _resolve(issue_kind: IssueKind) -> str:
        async with semaphore:
            return await provider.suggest_fix_async(issue_kind)

    tasks = [asyncio.ensure_future(_resolve(kind)) for kind in issue_kinds]
    done, pending = await asyncio.wait(tasks, timeout=timeout)

    if pending:
        logger.warning(
            "Fix resolution timed out after %s seconds, %d of %d fixes use the fallback provider",
            timeout,
            len(pending),
            len(tasks),
        )
        for task in pending:
            task.cancel()
        await asyncio.gather(*pending, return_exceptions=True)

    fixes = []
    for issue_kind, task in zip(issue_kinds, tasks):
        completed = task in done and not task.cancelled()
        if completed and task.exception() is None:
            fixes.append(task.result())
            continue
        if completed:
            log_exception(logger, task.exception(), "Fix provider failed")
        fixes.append(fallback_provider.suggest_fix(issue_kind))
    return fixes
