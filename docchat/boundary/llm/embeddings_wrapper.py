"""
Google Generative AI Embeddings wrapper with fixed output dimensionality.

The base GoogleGenerativeAIEmbeddings class ignores output_dimensionality
in the constructor; this subclass applies it to every embed call so all
vectors match the search index dimension.

Dependencies: langchain_google_genai
System role: Embedding dimension consistency for the search index
"""

import logging
from typing import List

from langchain_google_genai import GoogleGenerativeAIEmbeddings

logger = logging.getLogger(__name__)


class FixedDimensionEmbeddings(GoogleGenerativeAIEmbeddings):
    """GoogleGenerativeAIEmbeddings with a fixed output dimension."""

    _output_dimensionality: int = 1536

    def __init__(
        self,
        model: str = "models/gemini-embedding-001",
        output_dimensionality: int = 1536,
        **kwargs,
    ) -> None:
        """
        Initialize embeddings with fixed output dimensionality.

        Args:
            model: Google embedding model ID
            output_dimensionality: Dimension applied to every embed call
            **kwargs: Additional arguments for GoogleGenerativeAIEmbeddings
        """
        super().__init__(model=model, **kwargs)
        self._output_dimensionality = output_dimensionality
        logger.info(
            f"{__name__}:__init__ - Initialized with model={model}, "
            f"output_dimensionality={output_dimensionality}"
        )

    def embed_documents(
        self,
        texts: List[str],
        *,
        batch_size: int = 100,
        task_type: str | None = None,
        titles: List[str] | None = None,
        output_dimensionality: int | None = None,
    ) -> List[List[float]]:
        dim = output_dimensionality or self._output_dimensionality
        return super().embed_documents(
            texts,
            batch_size=batch_size,
            task_type=task_type,
            titles=titles,
            output_dimensionality=dim,
        )

    def embed_query(
        self,
        text: str,
        task_type: str | None = None,
        title: str | None = None,
        output_dimensionality: int | None = None,
    ) -> List[float]:
        dim = output_dimensionality or self._output_dimensionality
        return super().embed_query(
            text,
            task_type=task_type,
            title=title,
            output_dimensionality=dim,
        )
