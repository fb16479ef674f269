"""
LLM boundary layer.

Embedding and chat model clients backed by Google Generative AI.
"""

from docqa.boundary.llm.embeddings_wrapper import FixedDimensionEmbeddings
from docqa.boundary.llm.model_factory import create_chat_model, create_embeddings

__all__ = ["FixedDimensionEmbeddings", "create_chat_model", "create_embeddings"]
