"""
AWS boundary modules.

Exports: S3DocumentClient, StoredObject, TextractDocumentClient, AnalysisResult
"""

from .s3_client import S3DocumentClient, StoredObject, build_object_key
from .textract_client import AnalysisResult, TextractDocumentClient

__all__ = [
    "S3DocumentClient",
    "StoredObject",
    "build_object_key",
    "TextractDocumentClient",
    "AnalysisResult",
]
