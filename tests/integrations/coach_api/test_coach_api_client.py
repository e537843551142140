from unittest.mock import AsyncMock, Mock, patch

import pytest

from training.config.env_loader import MissingEnvironmentError
from training.integrations.coach_api import CoachApiClient, CoachApiError, client_from_env
from training.models import (
    CreateSessionFromTemplatePayload,
    StartSegment,
    TrainingBlockPayload,
    VitesseSegment,
    build_segment,
)

BASE_URL = "https://api.example.com/"


def _response(status_code: int = 200, json_data=None, text: str = "") -> Mock:
    response = Mock()
    response.status_code = status_code
    response.json.return_value = json_data
    response.text = text
    return response


@pytest.fixture
def client() -> CoachApiClient:
    return CoachApiClient(base_url=BASE_URL, token="secret-token", timeout=5)


@pytest.fixture
def mock_http():
    with patch("httpx.AsyncClient") as mock_client:
        instance = AsyncMock()
        mock_client.return_value.__aenter__.return_value = instance
        yield mock_client, instance


@pytest.mark.asyncio
async def test_list_templates(client, mock_http):
    mock_client, instance = mock_http
    instance.request.return_value = _response(
        json_data=[
            {
                "id": "tpl_1",
                "title": "Vitesse",
                "type": "vitesse",
                "series": [
                    {
                        "id": "serie_1",
                        "repeatCount": 2,
                        "segments": [{"blockType": "vitesse", "distance": 150}],
                    }
                ],
                "seriesRestInterval": 120,
                "seriesRestUnit": "s",
                "version": 3,
            }
        ]
    )

    templates = await client.list_templates()

    assert len(templates) == 1
    assert templates[0].id == "tpl_1"
    assert templates[0].version == 3
    assert isinstance(templates[0].series[0].segments[0], VitesseSegment)

    mock_client.assert_called_once_with(timeout=5)
    method, url = instance.request.call_args[0]
    assert method == "GET"
    assert url == "https://api.example.com/training-templates/mine"
    headers = instance.request.call_args[1]["headers"]
    assert headers["Authorization"] == "Bearer secret-token"


@pytest.mark.asyncio
async def test_no_token_sends_no_authorization(mock_http):
    _, instance = mock_http
    instance.request.return_value = _response(json_data=[])

    await CoachApiClient(base_url=BASE_URL).list_blocks()

    assert "Authorization" not in instance.request.call_args[1]["headers"]


@pytest.mark.asyncio
async def test_error_status_raises(client, mock_http):
    _, instance = mock_http
    instance.request.return_value = _response(404, text='{"error": "not found"}')

    with pytest.raises(CoachApiError) as exc_info:
        await client.get_template("tpl_missing")

    assert exc_info.value.status_code == 404
    assert "not found" in exc_info.value.detail


@pytest.mark.asyncio
async def test_create_template_sends_wire_payload(
    client, mock_http, template_draft_factory
):
    from training.form import normalize_template

    _, instance = mock_http
    payload = normalize_template(template_draft_factory.make())
    instance.request.return_value = _response(
        201, json_data={"id": "tpl_new", **payload.to_wire()}
    )

    template = await client.create_template(payload)

    assert template.id == "tpl_new"
    assert template.title == payload.title
    method, url = instance.request.call_args[0]
    assert method == "POST"
    assert url == "https://api.example.com/training-templates"
    assert instance.request.call_args[1]["json"] == payload.to_wire()


@pytest.mark.asyncio
async def test_create_session_from_template(client, mock_http):
    _, instance = mock_http
    instance.request.return_value = _response(
        201,
        json_data={"id": "session_9", "date": "2025-01-06", "title": "Vitesse", "status": "planned"},
    )
    payload = CreateSessionFromTemplatePayload(
        date="2025-01-06", start_time="18:30", duration_minutes=90, group_id="grp_1"
    )

    session = await client.create_session_from_template("tpl_1", payload)

    assert session.id == "session_9"
    _, url = instance.request.call_args[0]
    assert url == "https://api.example.com/training-templates/tpl_1/sessions"
    assert instance.request.call_args[1]["json"] == {
        "date": "2025-01-06",
        "startTime": "18:30",
        "durationMinutes": 90,
        "groupId": "grp_1",
    }


@pytest.mark.asyncio
async def test_create_block_omits_segment_id(client, mock_http):
    _, instance = mock_http
    segment = build_segment("start", {"start_count": 6})
    instance.request.return_value = _response(
        201,
        json_data={"id": "blk_1", "title": "Départs", "segment": {"blockType": "start", "startCount": 6}},
    )

    block = await client.create_block(TrainingBlockPayload(title="Départs", segment=segment))

    assert isinstance(block.segment, StartSegment)
    sent = instance.request.call_args[1]["json"]
    assert "id" not in sent["segment"]


@pytest.mark.asyncio
async def test_delete_block(client, mock_http):
    _, instance = mock_http
    instance.request.return_value = _response(204)

    assert await client.delete_block("blk_1") is None

    method, url = instance.request.call_args[0]
    assert method == "DELETE"
    assert url == "https://api.example.com/training-blocks/blk_1"


def test_client_from_env(monkeypatch):
    monkeypatch.setenv("ENV", "prod")
    monkeypatch.setenv("TRAINING_API_URL", "https://training.example.com")
    monkeypatch.setenv("TRAINING_API_TOKEN", "tok")
    monkeypatch.setenv("TRAINING_API_TIMEOUT", "12")

    client = client_from_env()

    assert client.base_url == "https://training.example.com"
    assert client.token == "tok"
    assert client.timeout == 12.0


def test_client_from_env_requires_url(monkeypatch):
    monkeypatch.setenv("ENV", "prod")
    with pytest.raises(MissingEnvironmentError, match="TRAINING_API_URL"):
        client_from_env()
