"""Async client for the training API (templates and reusable blocks)."""

from dataclasses import dataclass
import logging
import os
from typing import Any, Optional

import httpx

from training.config.env_loader import (
    api_timeout,
    load_environment,
    validate_required_env_vars,
)
from training.models import (
    CreateSessionFromTemplatePayload,
    TemplatePayload,
    TrainingBlock,
    TrainingBlockPayload,
    TrainingSession,
    TrainingTemplate,
)

logger = logging.getLogger(__name__)

TEMPLATES_PATH = "/training-templates"
BLOCKS_PATH = "/training-blocks"


class CoachApiError(RuntimeError):
    """Raised when the training API answers with a non-2xx status."""

    def __init__(self, status_code: int, detail: str):
        super().__init__(f"Training API error {status_code}: {detail}")
        self.status_code = status_code
        self.detail = detail


@dataclass
class CoachApiClient:
    """Client for the coach's templates and block library.

    Every call opens a short-lived `httpx.AsyncClient`.
    """

    base_url: str
    token: Optional[str] = None
    timeout: float = 30.0

    def _url(self, path: str) -> str:
        return f"{self.base_url.rstrip('/')}{path}"

    def _auth_headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    async def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        url = self._url(path)
        logger.info(f"{method} {url}")
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            response = await client.request(
                method, url, headers=self._auth_headers(), **kwargs
            )
        if not 200 <= response.status_code < 300:
            logger.error(
                f"Training API error on {method} {path}: "
                f"{response.status_code} {response.text}"
            )
            raise CoachApiError(response.status_code, response.text)
        return response

    async def _get_json(self, path: str) -> Any:
        response = await self._request("GET", path)
        return response.json()

    # Templates

    async def list_templates(self) -> list[TrainingTemplate]:
        """Templates owned by the authenticated coach."""
        data = await self._get_json(f"{TEMPLATES_PATH}/mine")
        templates = [TrainingTemplate.model_validate(item) for item in data]
        logger.debug(f"Received {len(templates)} templates")
        return templates

    async def get_template(self, template_id: str) -> TrainingTemplate:
        data = await self._get_json(f"{TEMPLATES_PATH}/{template_id}")
        return TrainingTemplate.model_validate(data)

    async def create_template(self, payload: TemplatePayload) -> TrainingTemplate:
        response = await self._request("POST", TEMPLATES_PATH, json=payload.to_wire())
        return TrainingTemplate.model_validate(response.json())

    async def update_template(
        self, template_id: str, payload: TemplatePayload
    ) -> TrainingTemplate:
        response = await self._request(
            "PUT", f"{TEMPLATES_PATH}/{template_id}", json=payload.to_wire()
        )
        return TrainingTemplate.model_validate(response.json())

    async def delete_template(self, template_id: str) -> None:
        await self._request("DELETE", f"{TEMPLATES_PATH}/{template_id}")

    async def create_session_from_template(
        self, template_id: str, payload: CreateSessionFromTemplatePayload
    ) -> TrainingSession:
        """Schedule a session built from a template."""
        response = await self._request(
            "POST",
            f"{TEMPLATES_PATH}/{template_id}/sessions",
            json=payload.to_wire(),
        )
        return TrainingSession.model_validate(response.json())

    # Blocks

    async def list_blocks(self) -> list[TrainingBlock]:
        data = await self._get_json(f"{BLOCKS_PATH}/mine")
        return [TrainingBlock.model_validate(item) for item in data]

    async def get_block(self, block_id: str) -> TrainingBlock:
        data = await self._get_json(f"{BLOCKS_PATH}/{block_id}")
        return TrainingBlock.model_validate(data)

    async def create_block(self, payload: TrainingBlockPayload) -> TrainingBlock:
        response = await self._request("POST", BLOCKS_PATH, json=payload.to_wire())
        return TrainingBlock.model_validate(response.json())

    async def update_block(
        self, block_id: str, payload: TrainingBlockPayload
    ) -> TrainingBlock:
        response = await self._request(
            "PUT", f"{BLOCKS_PATH}/{block_id}", json=payload.to_wire()
        )
        return TrainingBlock.model_validate(response.json())

    async def delete_block(self, block_id: str) -> None:
        await self._request("DELETE", f"{BLOCKS_PATH}/{block_id}")


def client_from_env() -> CoachApiClient:
    """Build a client from TRAINING_API_URL, TRAINING_API_TOKEN and TRAINING_API_TIMEOUT.

    Raises:
        MissingEnvironmentError: If TRAINING_API_URL is not set.
    """
    load_environment()
    validate_required_env_vars()
    return CoachApiClient(
        base_url=os.environ["TRAINING_API_URL"],
        token=os.getenv("TRAINING_API_TOKEN") or None,
        timeout=api_timeout(),
    )
