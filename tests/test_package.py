"""Tests for DOCX package reading, writing and part discovery."""

from __future__ import annotations

from pathlib import Path

import pytest

from docx_layout.errors import EntryNotFoundError, InvalidPackageError
from docx_layout.package import (
    describe_package,
    get_translatable_files,
    get_xml_content,
    read_package,
    set_xml_content,
    write_package,
)

from conftest import IMAGE_BYTES, sample_files


class TestPackageIO:
    """Tests for archive read/write."""

    def test_read_preserves_order_and_bytes(self, sample_docx: Path):
        files = read_package(sample_docx)

        assert list(files) == list(sample_files())
        assert files['word/media/image1.png'] == IMAGE_BYTES

    def test_write_then_read(self, tmp_path: Path):
        output = tmp_path / "nested" / "out.docx"

        write_package(sample_files(), output)

        assert read_package(output) == sample_files()

    def test_missing_archive(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            read_package(tmp_path / "nonexistent.docx")

    def test_non_zip_file_is_rejected(self, tmp_path: Path):
        path = tmp_path / "broken.docx"
        path.write_bytes(b"not a zip archive")

        with pytest.raises(InvalidPackageError, match="Not a valid DOCX archive"):
            read_package(path)

    def test_get_and_set_xml_content(self):
        files = sample_files()

        set_xml_content(files, 'word/header1.xml', '<w:hdr>Entête</w:hdr>')

        assert files['word/header1.xml'] == '<w:hdr>Entête</w:hdr>'.encode('utf-8')
        assert get_xml_content(files, 'word/header1.xml') == '<w:hdr>Entête</w:hdr>'

    def test_missing_entry_names_path(self):
        with pytest.raises(EntryNotFoundError) as excinfo:
            get_xml_content(sample_files(), 'word/comments.xml')

        assert excinfo.value.path == 'word/comments.xml'
        assert 'word/comments.xml' in str(excinfo.value)

    def test_missing_entry_is_a_key_error(self):
        with pytest.raises(KeyError):
            get_xml_content({}, 'word/document.xml')


class TestTranslatableFiles:
    """Tests for the allow-list of translatable parts."""

    def test_sample_package(self):
        assert get_translatable_files(sample_files()) == [
            'word/document.xml',
            'word/header1.xml',
            'word/footer1.xml',
        ]

    def test_allow_list(self):
        files = dict.fromkeys([
            'word/comments.xml',
            'word/footnotes.xml',
            'word/header12.xml',
            'word/header.xml',
            'word/endnotes.xml',
            'word/footer3.xml',
            'word/document.xml',
            'word/styles.xml',
            'word/settings.xml',
            'word/_rels/document.xml.rels',
            'customXml/item1.xml',
            'docProps/core.xml',
            'word/headerA.xml',
            'word/glossary/document.xml',
            'xword/document.xml',
        ], b'')

        assert get_translatable_files(files) == [
            'word/comments.xml',
            'word/footnotes.xml',
            'word/header12.xml',
            'word/header.xml',
            'word/endnotes.xml',
            'word/footer3.xml',
            'word/document.xml',
        ]


class TestDescribePackage:
    """Tests for package summaries."""

    def test_counts(self):
        info = describe_package(sample_files())

        assert info.entry_count == 6
        assert info.segment_counts == {
            'word/document.xml': 2,
            'word/header1.xml': 1,
            'word/footer1.xml': 1,
        }
        assert info.total_segments == 4

    def test_does_not_modify_package(self):
        files = sample_files()

        describe_package(files)

        assert files == sample_files()
