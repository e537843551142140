import pytest

from tests._factories import (
    SegmentFactory,
    SeriesFactory,
    TemplateDraftFactory,
    TrainingSessionFactory,
    TrainingTemplateFactory,
)


@pytest.fixture(autouse=True)
def isolate_training_api_env(monkeypatch):
    """Keep unit tests independent from the developer's environment."""
    for var in ("ENV", "TRAINING_API_URL", "TRAINING_API_TOKEN", "TRAINING_API_TIMEOUT"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture(scope="session")
def segment_factory() -> SegmentFactory:
    return SegmentFactory()


@pytest.fixture(scope="session")
def series_factory() -> SeriesFactory:
    return SeriesFactory()


@pytest.fixture(scope="session")
def template_draft_factory() -> TemplateDraftFactory:
    return TemplateDraftFactory()


@pytest.fixture(scope="session")
def training_template_factory() -> TrainingTemplateFactory:
    return TrainingTemplateFactory()


@pytest.fixture(scope="session")
def training_session_factory() -> TrainingSessionFactory:
    return TrainingSessionFactory()
