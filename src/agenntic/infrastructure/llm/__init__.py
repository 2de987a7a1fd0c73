"""
Language model adapters.
"""

from agenntic.infrastructure.llm.huggingface import HuggingFaceModel
from agenntic.infrastructure.llm.mock import MockModel
from agenntic.infrastructure.llm.ollama import OllamaModel
from agenntic.infrastructure.llm.openai import OpenAIModel

__all__ = [
    "HuggingFaceModel",
    "MockModel",
    "OllamaModel",
    "OpenAIModel",
]
