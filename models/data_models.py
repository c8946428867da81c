"""
Pydantic data models for Document File Service
"""

from pydantic import BaseModel
from typing import Dict, Optional

class FileInfo(BaseModel):
    filename: str
    escaped_filename: str
    base_name: str
    extension: str
    document_type: Optional[str] = None  # "word", "cell", "slide"

    supported: bool = False
    editable: bool = False
    view_only: bool = False
    loss_editable: bool = False
    ooxml_convertible: bool = False

class FileTypeResult(BaseModel):
    extension: str
    document_type: str

class EscapedFilename(BaseModel):
    filename: str
    escaped: str

class SizeCheckRequest(BaseModel):
    url: str
    limit: Optional[int] = None  # bytes, falls back to configured maximum

class SizeCheckResult(BaseModel):
    url: str
    limit: int
    valid: bool
    content_length: Optional[str] = None
    detail: str = ""

class SupportedExtensions(BaseModel):
    editable: Dict[str, str] = {}
    ooxml_convertible: Dict[str, str] = {}
    loss_editable: Dict[str, str] = {}
    view_only: Dict[str, str] = {}
