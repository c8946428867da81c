"""
File classification services for Document File Service
"""

import logging
from typing import Dict, Optional

from config.environment import config
from models.data_models import FileInfo, SizeCheckResult, SupportedExtensions
from utils.file_utils import (
    FileUtility, InvalidContentLengthError, new_file_utility,
    EDITABLE_EXTENSIONS, OOXML_CONVERTIBLE_EXTENSIONS,
    DATA_LOSS_EDITABLE_EXTENSIONS, VIEW_ONLY_EXTENSIONS
)

logger = logging.getLogger(__name__)

_default_utility: Optional[FileUtility] = None

def get_file_utility() -> FileUtility:
    """Get the shared file utility instance"""
    global _default_utility
    if _default_utility is None:
        _default_utility = new_file_utility(timeout=config.get_http_config("head_timeout"))
    return _default_utility

def close_file_utility() -> None:
    """Close the shared file utility, if one was created"""
    global _default_utility
    if _default_utility is not None:
        _default_utility.close()
        _default_utility = None

def describe_file(filename: str, utility: Optional[FileUtility] = None) -> FileInfo:
    """Classify a file by name"""
    utility = utility or get_file_utility()
    extension = utility.get_file_ext(filename)

    supported = utility.is_extension_supported(extension)
    document_type = utility.get_file_type(extension) if supported else None

    return FileInfo(
        filename=filename,
        escaped_filename=utility.escape_filename(filename),
        base_name=utility.get_filename_without_extension(filename),
        extension=extension,
        document_type=document_type,
        supported=supported,
        editable=utility.is_extension_editable(extension),
        view_only=utility.is_extension_view_only(extension),
        loss_editable=utility.is_extension_loss_editable(extension),
        ooxml_convertible=utility.is_extension_ooxml_convertible(extension)
    )

def check_remote_file(url: str, limit: int, utility: Optional[FileUtility] = None) -> SizeCheckResult:
    """Check a remote file's Content-Length against a limit.

    An oversized or unreadable Content-Length gives a negative result;
    request failures are raised to the caller.
    """
    utility = utility or get_file_utility()
    try:
        utility.validate_file_size(limit, url)
    except InvalidContentLengthError as e:
        logger.info("Remote file %s rejected: %s", url, e)
        return SizeCheckResult(
            url=url,
            limit=limit,
            valid=False,
            content_length=e.content_length,
            detail=str(e)
        )

    return SizeCheckResult(url=url, limit=limit, valid=True)

def list_supported_extensions() -> SupportedExtensions:
    """Group the extension tables by category"""
    def _sorted(table) -> Dict[str, str]:
        return {ext: table[ext] for ext in sorted(table)}

    return SupportedExtensions(
        editable=_sorted(EDITABLE_EXTENSIONS),
        ooxml_convertible=_sorted(OOXML_CONVERTIBLE_EXTENSIONS),
        loss_editable=_sorted(DATA_LOSS_EDITABLE_EXTENSIONS),
        view_only=_sorted(VIEW_ONLY_EXTENSIONS)
    )
