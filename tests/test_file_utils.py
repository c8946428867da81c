"""
Tests for the file utility extension tables and filename helpers
"""

import pytest
import requests

from utils.file_utils import (
    FileUtility, OnlyofficeFileUtility, new_file_utility,
    ExtensionNotSupportedError, InvalidContentLengthError,
    EDITABLE_EXTENSIONS, OOXML_CONVERTIBLE_EXTENSIONS,
    DATA_LOSS_EDITABLE_EXTENSIONS, VIEW_ONLY_EXTENSIONS,
    WORD_TYPE, CELL_TYPE, SLIDE_TYPE
)

ALL_TABLES = [
    EDITABLE_EXTENSIONS,
    OOXML_CONVERTIBLE_EXTENSIONS,
    DATA_LOSS_EDITABLE_EXTENSIONS,
    VIEW_ONLY_EXTENSIONS,
]

@pytest.fixture
def utility():
    return new_file_utility()

def test_new_file_utility_returns_interface():
    """Constructor returns the default implementation"""
    utility = new_file_utility()
    assert isinstance(utility, FileUtility)
    assert isinstance(utility, OnlyofficeFileUtility)

def test_file_utility_is_abstract():
    with pytest.raises(TypeError):
        FileUtility()

def test_tables_are_lowercase_and_disjoint():
    """Every key is lowercase and appears in one table only"""
    seen = set()
    for table in ALL_TABLES:
        for ext, doc_type in table.items():
            assert ext == ext.lower()
            assert not ext.startswith('.')
            assert doc_type in (WORD_TYPE, CELL_TYPE, SLIDE_TYPE)
            assert ext not in seen
            seen.add(ext)

    assert len(seen) == 16 + 25 + 12 + 4

def test_tables_are_read_only():
    with pytest.raises(TypeError):
        EDITABLE_EXTENSIONS['md'] = WORD_TYPE

@pytest.mark.parametrize("ext,expected", [
    ("docx", WORD_TYPE),
    ("DOCX", WORD_TYPE),
    ("xlsx", CELL_TYPE),
    ("pptx", SLIDE_TYPE),
    ("csv", CELL_TYPE),
    ("odp", SLIDE_TYPE),
    ("xls", CELL_TYPE),
    ("Ppt", SLIDE_TYPE),
    ("pdf", WORD_TYPE),
])
def test_get_file_type(utility, ext, expected):
    assert utility.get_file_type(ext) == expected

@pytest.mark.parametrize("ext", ["exe", "", ".docx", "png"])
def test_get_file_type_unsupported(utility, ext):
    with pytest.raises(ExtensionNotSupportedError) as exc_info:
        utility.get_file_type(ext)

    assert str(exc_info.value) == "file extension is not supported"
    assert exc_info.value.extension == ext

def test_category_checks(utility):
    """Each category check only matches its own table"""
    assert utility.is_extension_editable("docx")
    assert not utility.is_extension_editable("doc")

    assert utility.is_extension_ooxml_convertible("DOC")
    assert not utility.is_extension_ooxml_convertible("docx")

    assert utility.is_extension_loss_editable("Odt")
    assert not utility.is_extension_loss_editable("pdf")

    assert utility.is_extension_view_only("PDF")
    assert not utility.is_extension_view_only("txt")

@pytest.mark.parametrize("ext,supported", [
    ("docx", True),
    ("XLSB", True),
    ("epub", True),
    ("djvu", True),
    ("zip", False),
    ("", False),
])
def test_is_extension_supported(utility, ext, supported):
    assert utility.is_extension_supported(ext) is supported

def test_escape_filename(utility):
    assert utility.escape_filename("reports/2023\\q1.docx") == "reports:2023:q1.docx"
    assert utility.escape_filename("plain name.xlsx") == "plain name.xlsx"
    assert utility.escape_filename("") == ""

@pytest.mark.parametrize("filename,ext", [
    ("report.docx", "docx"),
    ("Report.DOCX", "DOCX"),
    ("archive.tar.gz", "gz"),
    ("folder.v2/notes", ""),
    ("file.", ""),
    (".bashrc", "bashrc"),
    ("noextension", ""),
])
def test_get_file_ext(utility, filename, ext):
    assert utility.get_file_ext(filename) == ext

@pytest.mark.parametrize("filename,base", [
    ("report.docx", "report"),
    ("archive.tar.gz", "archive.tar"),
    ("dir/sub/slides.pptx", "dir/sub/slides"),
    ("folder.v2/notes", "folder.v2/notes"),
    ("file.", "file"),
    (".bashrc", ""),
])
def test_get_filename_without_extension(utility, filename, base):
    assert utility.get_filename_without_extension(filename) == base

def test_validate_file_size_within_limit(make_session):
    session = make_session(content_length=1024)
    utility = new_file_utility(session=session, timeout=3)

    assert utility.validate_file_size(2048, "http://docs.local/file.docx") is None

    url, kwargs = session.calls[0]
    assert url == "http://docs.local/file.docx"
    assert kwargs["allow_redirects"] is True
    assert kwargs["timeout"] == 3

def test_validate_file_size_equal_to_limit(make_session):
    utility = new_file_utility(session=make_session(content_length=2048))
    utility.validate_file_size(2048, "http://docs.local/file.docx")

def test_validate_file_size_exceeds_limit(make_session):
    utility = new_file_utility(session=make_session(content_length=4096))

    with pytest.raises(InvalidContentLengthError) as exc_info:
        utility.validate_file_size(2048, "http://docs.local/big.xlsx")

    error = exc_info.value
    assert str(error) == "could not perform api actions due to exceeding content-length"
    assert error.limit == 2048
    assert error.content_length == "4096"
    assert error.url == "http://docs.local/big.xlsx"

def test_validate_file_size_missing_header(make_session):
    utility = new_file_utility(session=make_session())

    with pytest.raises(InvalidContentLengthError) as exc_info:
        utility.validate_file_size(2048, "http://docs.local/file.docx")

    assert exc_info.value.content_length is None

@pytest.mark.parametrize("raw_length", ["lots", "1_0", "\u0661\u0660", " 10 ", "10\n", "", "1.5"])
def test_validate_file_size_invalid_header(make_session, raw_length):
    """Only plain ASCII digits are accepted as a Content-Length"""
    utility = new_file_utility(session=make_session(content_length=raw_length))

    with pytest.raises(InvalidContentLengthError):
        utility.validate_file_size(2048, "http://docs.local/file.docx")

def test_validate_file_size_accepts_signed_length(make_session):
    utility = new_file_utility(session=make_session(content_length="+10"))
    utility.validate_file_size(10, "http://docs.local/a.txt")

def test_validate_file_size_reads_header_case_insensitively(make_session):
    session = make_session(**{"content-length": "10"})
    new_file_utility(session=session).validate_file_size(10, "http://docs.local/a.txt")

def test_validate_file_size_propagates_transport_errors(make_session):
    utility = new_file_utility(session=make_session(error=requests.ConnectionError("refused")))

    with pytest.raises(requests.ConnectionError):
        utility.validate_file_size(2048, "http://docs.local/file.docx")
