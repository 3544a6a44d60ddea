"""pypdf backend implementation for PDF Extract."""

from __future__ import annotations

import asyncio
import io
import logging
import re
import threading
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Sequence

from pypdf import PageObject, PdfReader
from pypdf.errors import PdfReadError
from pypdf.generic import (
    ArrayObject,
    BooleanObject,
    DictionaryObject,
    FloatObject,
    IndirectObject,
    NameObject,
    NumberObject,
)

from ..exceptions import (
    AnnotationError,
    EncryptedPDFError,
    InvalidPDFError,
    MetadataError,
    TextContentError,
)
from ..types import DocumentMeta, LinkRegion, PageInfo, TextRun
from .base import BackendDocument, BackendPage, ExtractionBackend

_LOGGER = logging.getLogger("pdf_extract")

_WHITESPACE = re.compile(r"\s")

# XMP properties exposed by pypdf, keyed by their qualified name
_XMP_PROPERTIES = {
    "dc:title": "dc_title",
    "dc:creator": "dc_creator",
    "dc:description": "dc_description",
    "dc:subject": "dc_subject",
    "dc:format": "dc_format",
    "pdf:producer": "pdf_producer",
    "pdf:keywords": "pdf_keywords",
    "pdf:pdfversion": "pdf_pdfversion",
    "xmp:creatortool": "xmp_creator_tool",
    "xmp:createdate": "xmp_create_date",
    "xmp:modifydate": "xmp_modify_date",
    "xmp:metadatadate": "xmp_metadata_date",
    "xmpmm:documentid": "xmpmm_document_id",
    "xmpmm:instanceid": "xmpmm_instance_id",
}


def _resolve_indirect(obj: object | None) -> object | None:
    if isinstance(obj, IndirectObject):
        return obj.get_object()
    return obj


def _text_origin(cm: Sequence[float], tm: Sequence[float]) -> tuple[float, float]:
    """Baseline origin of the text matrix mapped through the current transform."""
    tx, ty = float(tm[4]), float(tm[5])
    x = tx * float(cm[0]) + ty * float(cm[2]) + float(cm[4])
    y = tx * float(cm[1]) + ty * float(cm[3]) + float(cm[5])
    return x, y


def _normalize_rotation(rotation: int) -> int:
    if rotation % 90 != 0:
        return 0
    return rotation % 360


def _chunk_runs(
    text: str,
    x: float,
    y: float,
    normalize_whitespace: bool = False,
    disable_combine_text_items: bool = False,
) -> List[TextRun]:
    """Turn one visitor chunk into text runs sharing the chunk origin."""
    # pypdf flushes bare line breaks between chunks
    if not text or not text.strip("\r\n"):
        return []
    pieces = [p for p in text.splitlines() if p] if disable_combine_text_items else [text]
    if normalize_whitespace:
        pieces = [_WHITESPACE.sub(" ", piece) for piece in pieces]
    return [TextRun(text=piece, x=x, y=y) for piece in pieces]


def _info_value(value: Any) -> Any:
    value = _resolve_indirect(value)
    if isinstance(value, BooleanObject):
        return bool(value.value)
    if isinstance(value, NumberObject):
        return int(value)
    if isinstance(value, FloatObject):
        return float(value)
    return str(value)


def _xmp_value(value: Any) -> Any:
    if isinstance(value, datetime):
        # naive datetimes from pypdf are already shifted to UTC
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc).replace(tzinfo=None)
        return value.isoformat() + "Z"
    if isinstance(value, dict):
        if "x-default" in value:
            return value["x-default"]
        return next(iter(value.values()), None)
    if isinstance(value, (list, tuple)):
        return [str(item) for item in value]
    return str(value)


@dataclass
class PypdfPage(BackendPage):
    document: "PypdfDocument"
    page: PageObject
    box_width: float
    box_height: float
    rotation: int

    def get_viewport(self, scale: float = 1.0) -> PageInfo:
        width = abs(self.box_width) * scale
        height = abs(self.box_height) * scale
        if self.rotation in (90, 270):
            width, height = height, width
        return PageInfo(
            num=self.num,
            scale=scale,
            rotation=self.rotation,
            offset_x=0.0,
            offset_y=0.0,
            width=width,
            height=height,
        )

    async def get_text_content(
        self,
        *,
        normalize_whitespace: bool = False,
        disable_combine_text_items: bool = False,
    ) -> List[TextRun]:
        try:
            return await asyncio.to_thread(
                self._collect_runs, normalize_whitespace, disable_combine_text_items
            )
        except Exception as exc:
            raise TextContentError(
                f"Failed to retrieve text content of page {self.num}: {exc}", page_num=self.num
            ) from exc

    async def get_annotations(self) -> List[LinkRegion]:
        try:
            return await asyncio.to_thread(self._collect_links)
        except Exception as exc:
            raise AnnotationError(
                f"Failed to retrieve annotations of page {self.num}: {exc}", page_num=self.num
            ) from exc

    def _collect_runs(self, normalize_whitespace: bool, disable_combine_text_items: bool) -> List[TextRun]:
        runs: List[TextRun] = []

        def visitor(text: str, cm: Any, tm: Any, _font_dict: Any, _font_size: Any) -> None:
            if not text:
                return
            x, y = _text_origin(cm, tm)
            runs.extend(
                _chunk_runs(text, x, y, normalize_whitespace, disable_combine_text_items)
            )

        with self.document.lock:
            self.page.extract_text(visitor_text=visitor)
        return runs

    def _collect_links(self) -> List[LinkRegion]:
        with self.document.lock:
            annotations = _resolve_indirect(self.page.get(NameObject("/Annots")))
            if not isinstance(annotations, ArrayObject):
                return []
            links: List[LinkRegion] = []
            for entry in annotations:
                annot = _resolve_indirect(entry)
                if not isinstance(annot, DictionaryObject):
                    continue
                if str(annot.get(NameObject("/Subtype"))) != "/Link":
                    continue
                action = _resolve_indirect(annot.get(NameObject("/A")))
                if not isinstance(action, DictionaryObject):
                    continue
                if str(action.get(NameObject("/S"))) != "/URI":
                    continue
                uri = _resolve_indirect(action.get(NameObject("/URI")))
                if not uri:
                    continue
                rect = _resolve_indirect(annot.get(NameObject("/Rect")))
                if not isinstance(rect, ArrayObject) or len(rect) < 4:
                    continue
                left, bottom, right, top = [float(rect[i]) for i in range(4)]
                links.append(
                    LinkRegion(
                        url=str(uri),
                        rect=(min(left, right), min(bottom, top), max(left, right), max(bottom, top)),
                    )
                )
        return links


@dataclass
class PypdfDocument(BackendDocument):
    reader: PdfReader
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    async def get_page(self, num: int) -> PypdfPage:
        if num < 1 or num > self.num_pages:
            raise InvalidPDFError(f"Page {num} is out of bounds (1-{self.num_pages}).")
        try:
            return await asyncio.to_thread(self._load_page, num)
        except Exception as exc:
            raise InvalidPDFError(f"Unable to read page {num}. Error: {exc}") from exc

    def _load_page(self, num: int) -> PypdfPage:
        with self.lock:
            page = self.reader.pages[num - 1]
            box = page.cropbox
            return PypdfPage(
                num=num,
                document=self,
                page=page,
                box_width=float(box.width),
                box_height=float(box.height),
                rotation=_normalize_rotation(int(page.rotation or 0)),
            )

    async def get_metadata(self) -> DocumentMeta:
        try:
            return await asyncio.to_thread(self._collect_metadata)
        except Exception as exc:
            raise MetadataError(f"Failed to retrieve document metadata: {exc}") from exc

    def _collect_metadata(self) -> DocumentMeta:
        with self.lock:
            info: Dict[str, Any] = {}
            header = self.reader.pdf_header or ""
            if header.startswith("%PDF-"):
                info["PDFFormatVersion"] = header[len("%PDF-"):]
            document_info = self.reader.metadata
            if document_info:
                for key, value in document_info.items():
                    info[str(key).lstrip("/")] = _info_value(value)
            xmp = self.reader.xmp_metadata
            return DocumentMeta(info=info, metadata=self._flatten_xmp(xmp) if xmp is not None else None)

    @staticmethod
    def _flatten_xmp(xmp: Any) -> Dict[str, Any]:
        metadata: Dict[str, Any] = {}
        for name, attribute in _XMP_PROPERTIES.items():
            try:
                value = getattr(xmp, attribute)
            except (ValueError, KeyError) as exc:
                _LOGGER.debug("Skipping malformed XMP property %s: %s", name, exc)
                continue
            if value in (None, "", [], {}):
                continue
            metadata[name] = _xmp_value(value)
        return metadata


class PypdfBackend(ExtractionBackend):
    """Backend implementation that uses `pypdf` under the hood."""

    def load(self, data: bytes, password: Optional[str] = None) -> PypdfDocument:
        try:
            reader = PdfReader(io.BytesIO(data))
        except PdfReadError as exc:
            raise InvalidPDFError(f"Corrupted or invalid PDF data. Error: {exc}") from exc
        except Exception as exc:
            raise InvalidPDFError(f"Unexpected error reading PDF. Error: {exc}") from exc

        if reader.is_encrypted:
            if password:
                if reader.decrypt(password) == 0:
                    raise EncryptedPDFError("Failed to decrypt PDF with supplied password.")
            else:
                raise EncryptedPDFError("PDF is encrypted. Supply a password to process this file.")

        try:
            num_pages = len(reader.pages)
        except Exception as exc:
            raise InvalidPDFError(f"Unable to read page tree. Error: {exc}") from exc

        _LOGGER.debug("Loaded PDF with %d pages (%d bytes)", num_pages, len(data))
        return PypdfDocument(num_pages=num_pages, file_size=len(data), reader=reader)
