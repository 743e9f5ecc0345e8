"""Commit message generation through an OpenAI-compatible endpoint."""
from typing import Optional

import httpx
from pydantic import ValidationError

from ..config import Config
from ..exceptions import APIError, MissingAPIKeyError
from ..models import ChatMessage, CompletionRequest, CompletionResponse
from ..prompts import COMMIT_MESSAGE_PROMPT, describe_language
from .cleaner import clean_completion

REQUEST_TIMEOUT = 30.0


class CommitMessageGenerator:
    """Asks a chat-completions endpoint for a commit message describing a diff.

    One blocking POST is made per call, with no retry and no streaming.

    Attributes:
        config (Config): Endpoint, credentials and sampling settings
        transport (Optional[httpx.BaseTransport]): Replaces the network transport,
            used by tests to answer requests locally
    """

    def __init__(self, config: Config, transport: Optional[httpx.BaseTransport] = None):
        self.config = config
        self.transport = transport

    def build_prompt(self, diff: str, language: str, notes: str = "") -> str:
        """Build the user prompt; notes are appended verbatim."""
        return COMMIT_MESSAGE_PROMPT.format(
            language=describe_language(language),
            diff=diff,
            notes=notes,
        )

    def build_request(self, prompt: str) -> CompletionRequest:
        return CompletionRequest(
            model=self.config.model,
            messages=[ChatMessage(role="user", content=prompt)],
            max_tokens=self.config.max_tokens,
            temperature=self.config.temperature,
        )

    def _create_client(self) -> httpx.Client:
        if self.transport is not None:
            return httpx.Client(transport=self.transport, timeout=REQUEST_TIMEOUT)
        if self.config.proxy_url:
            return httpx.Client(proxy=self.config.proxy_url, timeout=REQUEST_TIMEOUT)
        return httpx.Client(timeout=REQUEST_TIMEOUT)

    def _post(self, request: CompletionRequest) -> httpx.Response:
        headers = {"Authorization": f"Bearer {self.config.api_key}"}
        try:
            with self._create_client() as client:
                return client.post(
                    self.config.openai_endpoint,
                    json=request.model_dump(),
                    headers=headers,
                )
        except httpx.TimeoutException as e:
            raise APIError(f"Request to {self.config.openai_endpoint} timed out after {REQUEST_TIMEOUT:.0f}s") from e
        except httpx.HTTPError as e:
            raise APIError(f"Could not reach OpenAI API: {e}") from e

    def parse_response(self, response: httpx.Response) -> CompletionResponse:
        """Parse the response body, raising APIError for errors reported by the endpoint.

        An ``error`` object in the body takes precedence over everything
        else; ``choices`` is not looked at in that case.
        """
        try:
            data = response.json()
        except ValueError as e:
            raise APIError(
                f"Could not parse response (HTTP {response.status_code}): {e}"
            ) from e

        if isinstance(data, dict) and data.get("error") is not None:
            error = data["error"]
            message = error.get("message") if isinstance(error, dict) else error
            raise APIError(f"OpenAI API returned an error: {message}")

        try:
            parsed = CompletionResponse.model_validate(data)
        except ValidationError as e:
            raise APIError(f"Unexpected response from OpenAI API: {e}") from e

        if response.is_error and not parsed.choices:
            raise APIError(f"OpenAI API returned HTTP {response.status_code}")

        return parsed

    def generate(self, diff: str, language: str, notes: str = "") -> str:
        """Generate a commit message for the diff.

        Args:
            diff: Unstaged and staged changes
            language: Language code the message should be written in
            notes: Extra free text for the model

        Returns:
            str: The cleaned message, or an empty string when the endpoint
            returned no choices

        Raises:
            MissingAPIKeyError: No API key is configured
            APIError: The request failed or the endpoint reported an error
        """
        if not self.config.api_key:
            raise MissingAPIKeyError()

        request = self.build_request(self.build_prompt(diff, language, notes))
        response = self._post(request)
        completion = self.parse_response(response)

        if not completion.choices:
            return ""
        return clean_completion(completion.choices[0].message.content or "")
