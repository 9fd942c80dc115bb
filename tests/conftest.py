"""Shared fixtures: small DOCX packages built directly with zipfile."""

from __future__ import annotations

import sys
import zipfile
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))


W_NS = 'xmlns:w="http://schemas.openxmlformats.org/wordprocessingml/2006/main"'

CONTENT_TYPES_XML = (
    '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>\n'
    '<Types xmlns="http://schemas.openxmlformats.org/package/2006/content-types">'
    '<Default Extension="xml" ContentType="application/xml"/>'
    '</Types>'
)

DOCUMENT_XML = (
    '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>\n'
    f'<w:document {W_NS}><w:body>'
    '<w:p w:rsidR="00A1"><w:pPr><w:pStyle w:val="Title"/></w:pPr>'
    '<w:r><w:rPr><w:b/></w:rPr><w:t>Hello</w:t></w:r>'
    '<w:r><w:t xml:space="preserve"> world</w:t></w:r></w:p>\n'
    '<w:p/>\n'
    '<w:p><w:r><w:t xml:space="preserve">   </w:t></w:r></w:p>\n'
    '<w:p>\n  <w:r><w:t>Second paragraph</w:t></w:r>\n</w:p>\n'
    '<w:sectPr/></w:body></w:document>'
)

HEADER_XML = (
    '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>\n'
    f'<w:hdr {W_NS}><w:p><w:r><w:t>Company header</w:t></w:r></w:p></w:hdr>'
)

FOOTER_XML = (
    '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>\n'
    f'<w:ftr {W_NS}><w:p><w:r><w:t xml:space="preserve">Page </w:t></w:r>'
    '<w:r><w:fldChar w:fldCharType="begin"/></w:r></w:p></w:ftr>'
)

STYLES_XML = (
    '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>\n'
    f'<w:styles {W_NS}><w:style w:styleId="Title"><w:name w:val="Title"/></w:style></w:styles>'
)

IMAGE_BYTES = b'\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\x00\x00\x00\x01'


def sample_files() -> dict[str, bytes]:
    """Package entries in archive order."""
    return {
        '[Content_Types].xml': CONTENT_TYPES_XML.encode('utf-8'),
        'word/document.xml': DOCUMENT_XML.encode('utf-8'),
        'word/header1.xml': HEADER_XML.encode('utf-8'),
        'word/footer1.xml': FOOTER_XML.encode('utf-8'),
        'word/styles.xml': STYLES_XML.encode('utf-8'),
        'word/media/image1.png': IMAGE_BYTES,
    }


def write_docx(path: Path, files: dict[str, bytes]) -> Path:
    with zipfile.ZipFile(path, 'w', zipfile.ZIP_DEFLATED) as zf:
        for name, content in files.items():
            zf.writestr(name, content)
    return path


@pytest.fixture
def sample_docx(tmp_path: Path) -> Path:
    """Create a sample DOCX with body, header, footer and an image."""
    return write_docx(tmp_path / "sample.docx", sample_files())
