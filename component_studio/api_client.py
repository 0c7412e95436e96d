"""Async client for the Components REST API.

Submits finalised components (the text produced by ``CodeGenerator``) as the
``code`` field of a create-component request. The editor core never calls
this on its own; a higher layer decides when a component is final.

Typical usage::

    client = ComponentsClient("http://localhost:3001/api", token=token)
    submission = build_submission("button", store.get(), name="Primary CTA")
    result = await client.create_component(submission)
    print(result.component_id)
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Literal, Mapping

import httpx
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .codegen.generator import CodeGenerator
from .models import ComponentConfig

Complexity = Literal["SIMPLE", "INTERMEDIATE", "ADVANCED", "EXPERT"]
Framework = Literal["REACT", "VUE", "ANGULAR", "SVELTE", "VANILLA"]


class ComponentSubmission(BaseModel):
    """Payload of a create-component request."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str = Field(..., min_length=1, max_length=100)
    code: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1)
    description: str | None = Field(default=None, max_length=500)
    preview: str | None = Field(default=None)
    tags: list[str] = Field(default_factory=list)
    complexity: Complexity = Field(default="SIMPLE")
    is_public: bool = Field(default=True)
    framework: Framework = Field(default="REACT")
    version: str = Field(default="1.0.0")

    def to_payload(self) -> dict[str, Any]:
        """JSON body with camelCase keys, omitting unset optional fields."""
        return self.model_dump(by_alias=True, exclude_none=True)


class SubmissionResult(BaseModel):
    """Structured outcome of a create-component call."""

    success: bool = Field(default=True)
    component_id: str | None = Field(default=None)
    message: str = Field(default="")
    status_code: int | None = Field(default=None)
    error: str | None = Field(default=None)


def build_submission(
    kind: str | Enum | None,
    config: ComponentConfig | Mapping[str, Any],
    *,
    name: str | None = None,
    category: str | None = None,
    description: str | None = None,
    tags: list[str] | None = None,
    generator: CodeGenerator | None = None,
    **extra: Any,
) -> ComponentSubmission:
    """Build a submission whose ``code`` is the generated source of *kind*.

    The category and default name come from the kind registry.
    """
    generator = generator or CodeGenerator()
    spec = generator.registry.get(kind)
    return ComponentSubmission(
        name=name or spec.display_name,
        code=generator.generate(kind, config),
        category=category or spec.category,
        description=description,
        tags=tags or [spec.kind],
        **extra,
    )


class ComponentsClient:
    """Async client for the Components API.

    Transport failures are reported through ``SubmissionResult`` rather
    than raised, mirroring how the editor surfaces them as messages.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:3001/api",
        token: str = "",
        timeout: int = 30,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _client(self) -> httpx.AsyncClient:
        """Return a fresh ``AsyncClient`` configured with our base URL and timeout."""
        headers = {"Content-Type": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return httpx.AsyncClient(
            base_url=self.base_url,
            headers=headers,
            timeout=httpx.Timeout(self.timeout, connect=10.0),
        )

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        """Pull the server's error text out of a failed response."""
        try:
            data = response.json()
        except ValueError:
            return response.text[:500]
        if isinstance(data, dict):
            return str(data.get("message") or data.get("error") or "API request failed")
        return "API request failed"

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def create_component(self, submission: ComponentSubmission) -> SubmissionResult:
        """POST *submission* to ``/components``.

        Never raises: every failure is reported as ``success=False``.
        """
        try:
            async with self._client() as client:
                response = await client.post("/components", json=submission.to_payload())
                response.raise_for_status()
        except httpx.ConnectError:
            return SubmissionResult(
                success=False,
                error=f"Cannot connect to the Components API at {self.base_url}.",
            )
        except httpx.TimeoutException:
            return SubmissionResult(
                success=False,
                error=f"Request to the Components API timed out after {self.timeout}s.",
            )
        except httpx.HTTPStatusError as exc:
            return SubmissionResult(
                success=False,
                status_code=exc.response.status_code,
                error=f"HTTP {exc.response.status_code}: {self._error_message(exc.response)}",
            )
        except httpx.RequestError as exc:
            return SubmissionResult(
                success=False,
                error=f"Request to the Components API failed: {exc!r}",
            )
        except Exception as exc:  # noqa: BLE001
            return SubmissionResult(
                success=False,
                error=f"Unexpected error while submitting the component: {exc}",
            )

        try:
            data = response.json()
        except ValueError:
            return SubmissionResult(
                success=False,
                status_code=response.status_code,
                error="Components API returned a response that is not JSON.",
            )
        if not isinstance(data, dict):
            return SubmissionResult(
                success=False,
                status_code=response.status_code,
                error="Components API returned an unexpected response body.",
            )

        component = data.get("component")
        if not isinstance(component, dict):
            component = {}
        return SubmissionResult(
            success=True,
            component_id=str(component["id"]) if component.get("id") is not None else None,
            message=str(data.get("message") or ""),
            status_code=response.status_code,
        )
