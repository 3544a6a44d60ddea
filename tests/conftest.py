from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterable, Mapping, Sequence, Tuple, Union
import sys

import pytest
from pypdf import PdfWriter
from pypdf.generic import (
    ArrayObject,
    DictionaryObject,
    FloatObject,
    NameObject,
    NumberObject,
    StreamObject,
    TextStringObject,
)

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

Run = Tuple[str, float, float]
Link = Tuple[int, str, Tuple[float, float, float, float]]
# a page is either positioned runs or a raw content stream
Page = Union[Iterable[Run], bytes]

SAMPLE_XMP = b"""<?xpacket begin="" id="W5M0MpCehiHzreSzNTczkc9d"?>
<x:xmpmeta xmlns:x="adobe:ns:meta/">
 <rdf:RDF xmlns:rdf="http://www.w3.org/1999/02/22-rdf-syntax-ns#">
  <rdf:Description rdf:about=""
    xmlns:dc="http://purl.org/dc/elements/1.1/"
    xmlns:pdf="http://ns.adobe.com/pdf/1.3/"
    xmlns:xmp="http://ns.adobe.com/xap/1.0/">
   <dc:title><rdf:Alt><rdf:li xml:lang="x-default">My Title</rdf:li></rdf:Alt></dc:title>
   <dc:creator><rdf:Seq><rdf:li>Alice</rdf:li></rdf:Seq></dc:creator>
   <pdf:Producer>Prod</pdf:Producer>
   <xmp:CreateDate>2020-01-02T03:04:05Z</xmp:CreateDate>
   <xmp:CreatorTool>Tool</xmp:CreatorTool>
  </rdf:Description>
 </rdf:RDF>
</x:xmpmeta>
<?xpacket end="w"?>"""


def write_pdf(
    path: Path,
    pages: Sequence[Page],
    links: Iterable[Link] = (),
    metadata: Mapping[str, str] | None = None,
    password: str | None = None,
    xmp: bytes | None = None,
) -> Path:
    """Write a PDF whose pages show ``(text, x, y)`` runs in Helvetica.

    A page given as ``bytes`` is used verbatim as its content stream.
    """
    writer = PdfWriter()
    font_dict = DictionaryObject(
        {
            NameObject("/Type"): NameObject("/Font"),
            NameObject("/Subtype"): NameObject("/Type1"),
            NameObject("/BaseFont"): NameObject("/Helvetica"),
        }
    )
    font_ref = writer._add_object(font_dict)

    for runs in pages:
        page = writer.add_blank_page(width=612, height=792)
        page[NameObject("/Resources")] = DictionaryObject(
            {NameObject("/Font"): DictionaryObject({NameObject("/F1"): font_ref})}
        )
        if isinstance(runs, bytes):
            content_bytes = runs
        else:
            content_bytes = "\n".join(
                f"BT /F1 12 Tf {x} {y} Td ({text}) Tj ET" for text, x, y in runs
            ).encode("latin-1")
        stream = StreamObject()
        stream[NameObject("/Length")] = NumberObject(len(content_bytes))
        stream._data = content_bytes
        page[NameObject("/Contents")] = writer._add_object(stream)

    for page_index, url, rect in links:
        annotation = DictionaryObject(
            {
                NameObject("/Type"): NameObject("/Annot"),
                NameObject("/Subtype"): NameObject("/Link"),
                NameObject("/Rect"): ArrayObject([FloatObject(v) for v in rect]),
                NameObject("/A"): DictionaryObject(
                    {
                        NameObject("/S"): NameObject("/URI"),
                        NameObject("/URI"): TextStringObject(url),
                    }
                ),
            }
        )
        page = writer.pages[page_index]
        annots = page.get(NameObject("/Annots"))
        if annots is None:
            annots = ArrayObject()
            page[NameObject("/Annots")] = annots
        annots.append(writer._add_object(annotation))

    if metadata:
        writer.add_metadata(dict(metadata))
    if xmp is not None:
        xmp_stream = StreamObject()
        xmp_stream[NameObject("/Type")] = NameObject("/Metadata")
        xmp_stream[NameObject("/Subtype")] = NameObject("/XML")
        xmp_stream[NameObject("/Length")] = NumberObject(len(xmp))
        xmp_stream._data = xmp
        writer._root_object[NameObject("/Metadata")] = writer._add_object(xmp_stream)
    if password:
        writer.encrypt(password)

    with path.open("wb") as handle:
        writer.write(handle)
    return path


FULL_PAGE = (0.0, 0.0, 612.0, 792.0)


@pytest.fixture()
def pdf_factory(tmp_path: Path) -> Callable[..., Path]:
    def _create(filename: str, pages: Sequence[Page], **kwargs) -> Path:
        return write_pdf(tmp_path / filename, pages, **kwargs)

    return _create


@pytest.fixture()
def sample_xmp() -> bytes:
    return SAMPLE_XMP


@pytest.fixture()
def linked_pdf(pdf_factory: Callable[..., Path]) -> Path:
    """Three pages; only page 2 carries a link, covering the whole page."""
    return pdf_factory(
        "linked.pdf",
        [
            [("Introduction", 72, 700)],
            [("Visit", 72, 700), ("Example", 72, 680)],
            [("Closing", 72, 700)],
        ],
        links=[(1, "https://example.com/docs", FULL_PAGE)],
        metadata={"/Title": "Linked Sample", "/Author": "Tests"},
    )


@pytest.fixture()
def blank_pdf(tmp_path: Path) -> Path:
    pdf_path = tmp_path / "blank.pdf"
    writer = PdfWriter()
    for _ in range(4):
        writer.add_blank_page(width=200, height=300)
    with pdf_path.open("wb") as stream:
        writer.write(stream)
    return pdf_path
