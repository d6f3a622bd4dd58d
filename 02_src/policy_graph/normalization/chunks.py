"""Relevant-chunk collection from the shapes found in authored documents.

A state's ``relevantChunks`` / ``relevant_chunks`` field may be a flat list
of strings and records, a list of bilingual ``arabic_original`` /
``english_translation`` records, a language-keyed map, or a lone scalar.
Every shape is classified into one ``ChunkShape`` and normalized into the
same ``RelevantChunk`` record; the rest of the pipeline only ever sees the
deduplicated tuple returned by ``collect_relevant_chunks``.
"""

import logging
from enum import Enum
from typing import Any, Dict, Iterator, List, Mapping, Optional, Sequence, Tuple

from ..graph_model import RelevantChunk
from .aliases import clean_string, dedupe, first_present, first_string, string_list

logger = logging.getLogger(__name__)

CHUNK_FIELD_KEYS = ("relevantChunks", "relevant_chunks")
TEXT_KEYS = ("text", "content", "value")
LANGUAGE_KEYS = ("language", "lang", "locale")
REFERENCE_KEYS = ("referenceId", "reference_id", "id", "chunk_id")
SOURCE_KEYS = ("source", "sourceDocument", "source_document")
SECTION_KEYS = ("section", "sectionLabel", "section_label")
BILINGUAL_KEYS = ("arabic_original", "english_translation")
DEFAULT_LANGUAGE = "en"


class ChunkShape(Enum):
    ABSENT = "absent"
    SCALAR = "scalar"
    SEQUENCE = "sequence"
    BILINGUAL_PAIR = "bilingual_pair"
    RECORD = "record"
    LANGUAGE_MAP = "language_map"


def normalize_language(value: Any) -> str:
    language = clean_string(value).lower()
    if not language:
        return DEFAULT_LANGUAGE
    if language == "arabic" or language.startswith("ar"):
        return "ar"
    if language.startswith("en"):
        return "en"
    return language


def classify_shape(value: Any, nested: bool = False) -> ChunkShape:
    """Classify a raw chunk value; only a top-level mapping can be a language map."""
    if value is None:
        return ChunkShape.ABSENT
    if isinstance(value, (list, tuple)):
        return ChunkShape.SEQUENCE
    if isinstance(value, Mapping):
        if any(key in value for key in BILINGUAL_KEYS):
            return ChunkShape.BILINGUAL_PAIR
        if nested or any(key in value for key in TEXT_KEYS):
            return ChunkShape.RECORD
        return ChunkShape.LANGUAGE_MAP
    if isinstance(value, bool):
        return ChunkShape.ABSENT
    if isinstance(value, (str, int, float)):
        return ChunkShape.SCALAR
    return ChunkShape.ABSENT


def _format_number(value: Any) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _page_reference(pages: Any) -> Optional[str]:
    if isinstance(pages, (int, float, str)) and not isinstance(pages, bool):
        pages = [pages]
    if not isinstance(pages, (list, tuple)):
        return None
    labels = [
        _format_number(page).strip()
        for page in pages
        if isinstance(page, (int, float, str)) and not isinstance(page, bool)
    ]
    labels = [label for label in labels if label]
    if not labels:
        return None
    return f"Page {', '.join(labels)}"


def _nested_text(value: Any) -> str:
    if isinstance(value, Mapping):
        return clean_string(value.get("text"))
    return clean_string(value)


def _record_tags(record: Mapping[str, Any]) -> List[str]:
    return string_list(record.get("tags"))


def _make_chunk(
    text: str,
    language: Any,
    reference_id: Optional[str] = None,
    source: Optional[str] = None,
    section: Optional[str] = None,
    tags: Sequence[str] = (),
) -> Optional[RelevantChunk]:
    text = text.strip()
    if not text:
        return None
    unique_tags = dedupe(tags)
    return RelevantChunk(
        language=normalize_language(language),
        text=text,
        reference_id=reference_id or None,
        source=source or None,
        section=section or None,
        tags=unique_tags or None,
    )


def _from_scalar(value: Any, language: Optional[str]) -> Iterator[RelevantChunk]:
    text = value if isinstance(value, str) else _format_number(value)
    chunk = _make_chunk(text, language)
    if chunk is not None:
        yield chunk


def _from_bilingual_pair(record: Mapping[str, Any]) -> Iterator[RelevantChunk]:
    reference_id = first_string(record, ("chunk_id", "chunkId", "id"))
    page_reference = _page_reference(record.get("pages_arabic"))
    tags: List[str] = []
    if page_reference:
        tags.append(page_reference)
    similarity = record.get("similarity")
    if isinstance(similarity, (int, float)) and not isinstance(similarity, bool):
        tags.append(f"similarity: {_format_number(similarity)}")

    for language, key in (("ar", "arabic_original"), ("en", "english_translation")):
        chunk = _make_chunk(
            _nested_text(record.get(key)),
            language,
            reference_id=reference_id,
            source=page_reference,
            section=page_reference,
            tags=tags,
        )
        if chunk is not None:
            yield chunk


def _from_record(record: Mapping[str, Any], language: Optional[str]) -> Iterator[RelevantChunk]:
    reference = first_present(record, REFERENCE_KEYS)
    if isinstance(reference, (int, float)) and not isinstance(reference, bool):
        reference_id: Optional[str] = _format_number(reference)
    else:
        reference_id = clean_string(reference) or None

    chunk = _make_chunk(
        first_string(record, TEXT_KEYS) or "",
        first_string(record, LANGUAGE_KEYS) or language,
        reference_id=reference_id,
        source=first_string(record, SOURCE_KEYS),
        section=first_string(record, SECTION_KEYS),
        tags=_record_tags(record),
    )
    if chunk is None:
        logger.debug("Skipping relevant chunk record without text: keys=%s", sorted(record))
        return
    yield chunk


def _iter_chunks(
    value: Any, language: Optional[str] = None, nested: bool = False
) -> Iterator[RelevantChunk]:
    shape = classify_shape(value, nested)
    if shape is ChunkShape.SCALAR:
        yield from _from_scalar(value, language)
    elif shape is ChunkShape.SEQUENCE:
        for entry in value:
            yield from _iter_chunks(entry, language, nested=True)
    elif shape is ChunkShape.BILINGUAL_PAIR:
        yield from _from_bilingual_pair(value)
    elif shape is ChunkShape.RECORD:
        yield from _from_record(value, language)
    elif shape is ChunkShape.LANGUAGE_MAP:
        for language_key, entries in value.items():
            yield from _iter_chunks(entries, str(language_key), nested=True)


def chunk_key(chunk: RelevantChunk) -> str:
    return "::".join(
        [
            chunk.language,
            chunk.text,
            chunk.reference_id or "",
            chunk.section or "",
            chunk.source or "",
        ]
    )


def collect_relevant_chunks(state: Mapping[str, Any]) -> Optional[Tuple[RelevantChunk, ...]]:
    """Collect a state's chunks, merging tags of entries that share a key.

    Returns None rather than an empty tuple when nothing usable was found.
    """
    collected: Dict[str, RelevantChunk] = {}
    for chunk in _iter_chunks(first_present(state, CHUNK_FIELD_KEYS)):
        key = chunk_key(chunk)
        existing = collected.get(key)
        if existing is None:
            collected[key] = chunk
            continue
        merged_tags = dedupe([*(existing.tags or ()), *(chunk.tags or ())])
        collected[key] = RelevantChunk(
            language=existing.language,
            text=existing.text,
            reference_id=existing.reference_id,
            source=existing.source,
            section=existing.section,
            tags=merged_tags or None,
        )
    if not collected:
        return None
    return tuple(collected.values())
