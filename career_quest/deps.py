## Request-scoped dependencies
import logging

from fastapi import Depends

from career_quest.settings import Settings, get_settings
from career_quest.agents.llm.client import get_model_invoke as build_model_invoke
from career_quest.agents.pipeline import GenerationPipeline, ModelInvoke, PipelineConfig

pipeline_logger = logging.getLogger("career_quest.pipeline")

def get_pipeline(settings: Settings = Depends(get_settings)) -> GenerationPipeline:
    return GenerationPipeline(PipelineConfig.from_settings(settings), logger=pipeline_logger)

def get_model_invoke(settings: Settings = Depends(get_settings)) -> ModelInvoke:
    return build_model_invoke(settings)
