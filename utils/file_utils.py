"""
File utilities for Document File Service

Extension tables follow the document editor API documentation. Keys are
lowercase extensions without the leading dot.
"""

import logging
import re
from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import Mapping, Optional

import requests

from config.settings import HEAD_REQUEST_TIMEOUT

logger = logging.getLogger(__name__)

# Plain ASCII base-10 integer, optionally signed
_CONTENT_LENGTH_PATTERN = re.compile(r"[+-]?[0-9]+")

WORD_TYPE = "word"
CELL_TYPE = "cell"
SLIDE_TYPE = "slide"

# Fully editable extensions
EDITABLE_EXTENSIONS: Mapping[str, str] = MappingProxyType({
    'docm': WORD_TYPE,
    'docx': WORD_TYPE,
    'docxf': WORD_TYPE,
    'oform': WORD_TYPE,
    'dotm': WORD_TYPE,
    'dotx': WORD_TYPE,
    'xlsm': CELL_TYPE,
    'xlsx': CELL_TYPE,
    'xltm': CELL_TYPE,
    'xltx': CELL_TYPE,
    'potm': SLIDE_TYPE,
    'potx': SLIDE_TYPE,
    'ppsm': SLIDE_TYPE,
    'ppsx': SLIDE_TYPE,
    'pptm': SLIDE_TYPE,
    'pptx': SLIDE_TYPE,
})

# Editable once converted to OOXML
OOXML_CONVERTIBLE_EXTENSIONS: Mapping[str, str] = MappingProxyType({
    'doc': WORD_TYPE,
    'dot': WORD_TYPE,
    'fodt': WORD_TYPE,
    'mht': WORD_TYPE,
    'xml': WORD_TYPE,
    'sxw': WORD_TYPE,
    'stw': WORD_TYPE,
    'htm': WORD_TYPE,
    'mhtml': WORD_TYPE,
    'wps': WORD_TYPE,
    'wpt': WORD_TYPE,
    'fods': CELL_TYPE,
    'xls': CELL_TYPE,
    'xlt': CELL_TYPE,
    'sxc': CELL_TYPE,
    'et': CELL_TYPE,
    'ett': CELL_TYPE,
    'xlsb': CELL_TYPE,
    'fodp': SLIDE_TYPE,
    'pot': SLIDE_TYPE,
    'pps': SLIDE_TYPE,
    'ppt': SLIDE_TYPE,
    'sxi': SLIDE_TYPE,
    'dps': SLIDE_TYPE,
    'dpt': SLIDE_TYPE,
})

# Editable with possible loss of data
DATA_LOSS_EDITABLE_EXTENSIONS: Mapping[str, str] = MappingProxyType({
    'epub': WORD_TYPE,
    'fb2': WORD_TYPE,
    'html': WORD_TYPE,
    'odt': WORD_TYPE,
    'ott': WORD_TYPE,
    'rtf': WORD_TYPE,
    'txt': WORD_TYPE,
    'csv': CELL_TYPE,
    'ods': CELL_TYPE,
    'ots': CELL_TYPE,
    'odp': SLIDE_TYPE,
    'otp': SLIDE_TYPE,
})

# Read-only
VIEW_ONLY_EXTENSIONS: Mapping[str, str] = MappingProxyType({
    'djvu': WORD_TYPE,
    'oxps': WORD_TYPE,
    'pdf': WORD_TYPE,
    'xps': WORD_TYPE,
})

# Lookup order used by get_file_type
_TYPE_LOOKUP_ORDER = (
    EDITABLE_EXTENSIONS,
    DATA_LOSS_EDITABLE_EXTENSIONS,
    OOXML_CONVERTIBLE_EXTENSIONS,
    VIEW_ONLY_EXTENSIONS,
)

class FileUtilityError(Exception):
    """Base error for file utility operations"""

class ExtensionNotSupportedError(FileUtilityError):
    def __init__(self, extension: str):
        super().__init__("file extension is not supported")
        self.extension = extension

class InvalidContentLengthError(FileUtilityError):
    def __init__(self, url: str, limit: int, content_length: Optional[str] = None):
        super().__init__("could not perform api actions due to exceeding content-length")
        self.url = url
        self.limit = limit
        self.content_length = content_length

def _split_extension(filename: str) -> str:
    """Return the extension of the last path element, including the dot"""
    base = filename.rsplit('/', 1)[-1]
    dot = base.rfind('.')
    return base[dot:] if dot != -1 else ''

class FileUtility(ABC):
    """Basic filename interaction functions"""

    @abstractmethod
    def validate_file_size(self, limit: int, url: str) -> None:
        """Send a HEAD request to url and check Content-Length against limit.

        Raises InvalidContentLengthError when the header is missing, is not
        an integer or exceeds the limit. Transport errors propagate.
        """

    @abstractmethod
    def escape_filename(self, filename: str) -> str:
        """Sanitize a file name"""

    @abstractmethod
    def is_extension_supported(self, file_ext: str) -> bool:
        """Check the extension against every extension table"""

    @abstractmethod
    def is_extension_editable(self, file_ext: str) -> bool:
        """Check the extension against the editable table"""

    @abstractmethod
    def is_extension_view_only(self, file_ext: str) -> bool:
        """Check the extension against the view-only table"""

    @abstractmethod
    def is_extension_loss_editable(self, file_ext: str) -> bool:
        """Check the extension against the data-loss table"""

    @abstractmethod
    def is_extension_ooxml_convertible(self, file_ext: str) -> bool:
        """Check the extension against the OOXML conversion table"""

    @abstractmethod
    def get_filename_without_extension(self, filename: str) -> str:
        """Strip the file extension from a file name"""

    @abstractmethod
    def get_file_type(self, file_ext: str) -> str:
        """Map an extension to its document type.

        Raises ExtensionNotSupportedError for unknown extensions.
        """

    @abstractmethod
    def get_file_ext(self, filename: str) -> str:
        """Get file extension (without the dot) from a file name"""

    def close(self) -> None:
        """Release any resources held by the utility"""

class OnlyofficeFileUtility(FileUtility):
    """File utility backed by the static extension tables and requests"""

    def __init__(self, session: Optional[requests.Session] = None,
                 timeout: Optional[float] = None):
        self.session = session or requests.Session()
        self.timeout = timeout if timeout is not None else HEAD_REQUEST_TIMEOUT

    def validate_file_size(self, limit: int, url: str) -> None:
        logger.debug("Checking content length of %s (limit %d)", url, limit)
        with self.session.head(url, allow_redirects=True, timeout=self.timeout) as response:
            raw_length = response.headers.get('Content-Length')

        if raw_length is None or not _CONTENT_LENGTH_PATTERN.fullmatch(raw_length):
            logger.warning("Invalid Content-Length %r for %s", raw_length, url)
            raise InvalidContentLengthError(url, limit, raw_length)

        content_length = int(raw_length)
        if content_length > limit:
            logger.warning("Content-Length %d for %s exceeds limit %d", content_length, url, limit)
            raise InvalidContentLengthError(url, limit, raw_length)

    def escape_filename(self, filename: str) -> str:
        return filename.replace('\\', ':').replace('/', ':')

    def is_extension_supported(self, file_ext: str) -> bool:
        ext = file_ext.lower()
        return any(ext in table for table in _TYPE_LOOKUP_ORDER)

    def is_extension_editable(self, file_ext: str) -> bool:
        return file_ext.lower() in EDITABLE_EXTENSIONS

    def is_extension_view_only(self, file_ext: str) -> bool:
        return file_ext.lower() in VIEW_ONLY_EXTENSIONS

    def is_extension_loss_editable(self, file_ext: str) -> bool:
        return file_ext.lower() in DATA_LOSS_EDITABLE_EXTENSIONS

    def is_extension_ooxml_convertible(self, file_ext: str) -> bool:
        return file_ext.lower() in OOXML_CONVERTIBLE_EXTENSIONS

    def get_filename_without_extension(self, filename: str) -> str:
        ext = _split_extension(filename)
        return filename[:len(filename) - len(ext)] if ext else filename

    def get_file_type(self, file_ext: str) -> str:
        ext = file_ext.lower()
        for table in _TYPE_LOOKUP_ORDER:
            if ext in table:
                return table[ext]

        raise ExtensionNotSupportedError(file_ext)

    def get_file_ext(self, filename: str) -> str:
        return _split_extension(filename).replace('.', '')

    def close(self) -> None:
        self.session.close()

def new_file_utility(session: Optional[requests.Session] = None,
                     timeout: Optional[float] = None) -> FileUtility:
    """Create the default file utility implementation"""
    return OnlyofficeFileUtility(session=session, timeout=timeout)
