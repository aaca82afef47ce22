#!/usr/bin/env python3
"""
indexer.py
----------
Second stage of the pipeline: RawRecords → Collection.

The indexer is a barrier: it consumes every record before assigning
identifiers, detecting duplicates and sorting, since both need global
visibility of the content.

Build steps:
    1. Derive an identifier for every record (filename slug, ``-N`` suffix
       for the Nth sub-document of a split file)
    2. Abort on duplicate identifiers (DuplicateIdentifierError)
    3. Validate records; apply the validation policy
       - STRICT: any invalid record aborts (CollectionValidationError)
       - SKIP: invalid records are excluded and reported
    4. Optionally drop drafts
    5. Sort by publish date (newest first), then identifier

The resulting Collection is immutable and explicitly passed around; there
is no module-level instance.

Usage:
    from quire.pipeline.indexer import build, build_collection

    collection = build(load_all(content_dir))
    latest = collection.all()[0]
    post = collection.by_identifier("hello-world")
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from collections import Counter, defaultdict
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

# --- Local imports ---
from quire.core.config import IndexerConfig, LoaderConfig, ValidationPolicy
from quire.core.exceptions import (
    CollectionValidationError,
    DuplicateIdentifierError,
    NotFoundError,
    ValidationError,
)
from quire.core.logging_manager import QuireLogger, safe_logger
from quire.dataclasses.document import Document
from quire.dataclasses.raw_record import RawRecord
from quire.pipeline.loader import load_all
from quire.utils.slugify import derive_identifier
from quire.validators.document import DocumentValidator


@dataclass(frozen=True)
class SkippedDocument:
    """A record excluded from the collection, with the reason."""

    source_path: Path
    offset: int
    error: ValidationError

    @property
    def reason(self) -> str:
        return f"{self.error.field}: {self.error.message}"


class Collection:
    """
    Immutable, ordered set of validated documents.

    Documents are ordered by publish date (newest first), ties broken by
    identifier. Read operations only; build one with ``build()``.

    Attributes:
        skipped: Records excluded under the SKIP validation policy
        drafts_excluded: Number of drafts left out of the collection
    """

    __slots__ = ("_documents", "_by_identifier", "_skipped", "_drafts_excluded")

    def __init__(
        self,
        documents: Iterable[Document] = (),
        skipped: Iterable[SkippedDocument] = (),
        drafts_excluded: int = 0,
    ) -> None:
        ordered = tuple(sorted(documents, key=sort_key))
        by_identifier: Dict[str, Document] = {}
        for document in ordered:
            if document.identifier in by_identifier:
                raise DuplicateIdentifierError(document.identifier)
            by_identifier[document.identifier] = document

        self._documents: Tuple[Document, ...] = ordered
        self._by_identifier: Mapping[str, Document] = MappingProxyType(by_identifier)
        self._skipped: Tuple[SkippedDocument, ...] = tuple(skipped)
        self._drafts_excluded = drafts_excluded

    @property
    def skipped(self) -> Tuple[SkippedDocument, ...]:
        return self._skipped

    @property
    def drafts_excluded(self) -> int:
        return self._drafts_excluded

    # ---- Read operations ----
    def all(self) -> Tuple[Document, ...]:
        """All documents in collection order."""
        return self._documents

    def by_identifier(self, identifier: str) -> Document:
        """
        Look up a document.

        Raises:
            NotFoundError: If no document has this identifier
        """
        try:
            return self._by_identifier[identifier]
        except KeyError:
            raise NotFoundError(identifier) from None

    def get(self, identifier: str, default: Optional[Document] = None) -> Optional[Document]:
        """Look up a document, returning ``default`` when absent."""
        return self._by_identifier.get(identifier, default)

    def by_tag(self, tag: str) -> Tuple[Document, ...]:
        """Documents carrying a tag (case-insensitive), in collection order."""
        wanted = tag.lower()
        return tuple(
            document for document in self._documents
            if any(t.lower() == wanted for t in document.tags)
        )

    def tags(self) -> Dict[str, int]:
        """Tag name to number of documents, sorted by tag."""
        counts = Counter(tag for document in self._documents for tag in document.tags)
        return dict(sorted(counts.items()))

    # ---- Container protocol ----
    def __len__(self) -> int:
        return len(self._documents)

    def __iter__(self) -> Iterator[Document]:
        return iter(self._documents)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._by_identifier

    def __repr__(self) -> str:
        return f"Collection({len(self._documents)} documents, {len(self.skipped)} skipped)"


def sort_key(document: Document) -> Tuple[int, str]:
    """Newest first, then identifier ascending."""
    return (-document.publish_date.toordinal(), document.identifier)


def assign_identifiers(records: List[RawRecord]) -> List[Tuple[RawRecord, str]]:
    """
    Pair every record with its identifier and reject duplicates.

    Records whose identifier cannot be derived get an empty string; the
    validator reports them.

    Raises:
        DuplicateIdentifierError: If two records share an identifier
    """
    assigned: List[Tuple[RawRecord, str]] = []
    sources: Dict[str, List[str]] = defaultdict(list)

    for record in records:
        title = record.frontmatter.get("title")
        identifier = derive_identifier(record.source_path, record.offset, title)
        assigned.append((record, identifier))
        if identifier:
            sources[identifier].append(record.location)

    for identifier, locations in sources.items():
        if len(locations) > 1:
            raise DuplicateIdentifierError(identifier, locations)

    return assigned


def build(
    raw_records: Iterable[RawRecord],
    config: Optional[IndexerConfig] = None,
    logger: Optional[QuireLogger] = None,
) -> Collection:
    """
    Validate, deduplicate and order records into a Collection.

    Args:
        raw_records: Loader output (consumed entirely)
        config: Indexer settings (strict policy, drafts included by default)
        logger: Optional logger

    Returns:
        Immutable Collection

    Raises:
        DuplicateIdentifierError: If two records resolve to one identifier
        CollectionValidationError: Under the STRICT policy, if any record
            fails validation (lists every failure)
    """
    config = config or IndexerConfig()
    log = safe_logger(logger)
    validator = DocumentValidator()

    records = list(raw_records)
    assigned = assign_identifiers(records)

    documents: List[Document] = []
    errors: List[ValidationError] = []
    for record, identifier in assigned:
        try:
            documents.append(validator.to_document(record, identifier))
        except ValidationError as e:
            errors.append(e)

    if errors and config.policy is ValidationPolicy.STRICT:
        log.log_warning(
            "Strict build aborted",
            {"records": len(records), "invalid": len(errors)},
        )
        raise CollectionValidationError(errors)

    skipped = [SkippedDocument(e.source_path, e.offset, e) for e in errors]
    for item in skipped:
        log.log_warning(f"Skipped invalid document {item.error}")

    drafts_excluded = 0
    if not config.include_drafts:
        published = [d for d in documents if not d.draft]
        drafts_excluded = len(documents) - len(published)
        documents = published

    collection = Collection(documents, skipped, drafts_excluded)
    log.log_operation(
        "build",
        {
            "records": len(records),
            "documents": len(collection),
            "skipped": len(skipped),
            "drafts_excluded": drafts_excluded,
            "policy": config.policy.value,
        },
    )
    return collection


def build_collection(
    content_root: Path,
    loader_config: Optional[LoaderConfig] = None,
    indexer_config: Optional[IndexerConfig] = None,
    logger: Optional[QuireLogger] = None,
) -> Collection:
    """
    Load a content root and build its collection in one call.

    Args:
        content_root: Directory holding content files
        loader_config: Loader settings
        indexer_config: Indexer settings
        logger: Optional logger

    Returns:
        Immutable Collection

    Raises:
        LoadError: On unreadable files or malformed frontmatter
        IndexBuildError: On duplicates or (strict policy) invalid documents
    """
    records = load_all(Path(content_root), loader_config, logger)
    return build(records, indexer_config, logger)
