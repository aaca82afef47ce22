"""
Content pipeline: loader → indexer → (optional) manifest export.
"""
from quire.pipeline.loader import load_all, load_file
from quire.pipeline.indexer import Collection, SkippedDocument, build, build_collection

__all__ = [
    "Collection",
    "SkippedDocument",
    "build",
    "build_collection",
    "load_all",
    "load_file",
]
