import logging
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from career_quest.main import app
from career_quest.deps import get_model_invoke, get_pipeline
from career_quest.agents.pipeline import GenerationPipeline, PipelineConfig


@pytest.fixture
def pipeline_config():
    return PipelineConfig(provider="gemini", api_key="test-key", model="gemini-2.5-flash")


@pytest.fixture
def pipeline(pipeline_config):
    return GenerationPipeline(pipeline_config, logger=logging.getLogger("tests.pipeline"))


@pytest.fixture
def model_stub():
    """Async model stub; set ``return_value`` or ``side_effect`` per test."""
    return AsyncMock(return_value="")


@pytest.fixture
def client(pipeline, model_stub):
    app.dependency_overrides[get_pipeline] = lambda: pipeline
    app.dependency_overrides[get_model_invoke] = lambda: model_stub
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
