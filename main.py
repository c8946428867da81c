"""
Main FastAPI application for Document File Service
"""

import logging
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
import requests

# Import our modules
from models.data_models import (
    FileInfo, FileTypeResult, EscapedFilename,
    SizeCheckRequest, SizeCheckResult, SupportedExtensions
)
from services.file_classification import (
    get_file_utility, close_file_utility, describe_file, check_remote_file, list_supported_extensions
)
from utils.file_utils import (
    ExtensionNotSupportedError,
    EDITABLE_EXTENSIONS, OOXML_CONVERTIBLE_EXTENSIONS,
    DATA_LOSS_EDITABLE_EXTENSIONS, VIEW_ONLY_EXTENSIONS
)
from config.environment import config, setup_logging

logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title=config.SERVICE_NAME,
    version=config.SERVICE_VERSION,
    description="File extension classification and remote file size checks for document editing"
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.on_event("startup")
async def startup_event():
    """Configure logging when the service starts"""
    setup_logging(config)
    logger.info("%s %s started", config.SERVICE_NAME, config.SERVICE_VERSION)

@app.on_event("shutdown")
async def shutdown_event():
    """Release outbound HTTP resources when the service stops"""
    close_file_utility()

# Health check endpoint
@app.get("/health")
async def health_check():
    """Health check endpoint with service status"""
    return {
        "status": "healthy",
        "service": config.SERVICE_NAME,
        "version": config.SERVICE_VERSION,
        "max_file_size": config.get_max_file_size(),
        "extensions_loaded": {
            "editable": len(EDITABLE_EXTENSIONS),
            "ooxml_convertible": len(OOXML_CONVERTIBLE_EXTENSIONS),
            "loss_editable": len(DATA_LOSS_EDITABLE_EXTENSIONS),
            "view_only": len(VIEW_ONLY_EXTENSIONS)
        }
    }

# Classification endpoints
@app.get("/file-info", response_model=FileInfo)
def file_info(filename: str):
    """Classify a file by its name"""
    return describe_file(filename)

@app.get("/file-type/{extension}", response_model=FileTypeResult)
def file_type(extension: str):
    """Map an extension to its document type"""
    try:
        document_type = get_file_utility().get_file_type(extension)
    except ExtensionNotSupportedError as e:
        raise HTTPException(status_code=404, detail=f"{e}: {e.extension}")

    return FileTypeResult(extension=extension, document_type=document_type)

@app.get("/supported-extensions", response_model=SupportedExtensions)
def supported_extensions():
    """List supported extensions grouped by category"""
    return list_supported_extensions()

@app.get("/escape-filename", response_model=EscapedFilename)
def escape_filename(filename: str):
    """Sanitize a file name"""
    return EscapedFilename(filename=filename, escaped=get_file_utility().escape_filename(filename))

# Remote file checks
@app.post("/validate-size", response_model=SizeCheckResult)
def validate_size(request: SizeCheckRequest):
    """Check a remote file's Content-Length against a size limit"""
    limit = request.limit if request.limit is not None else config.get_max_file_size()
    try:
        return check_remote_file(request.url, limit)
    except requests.RequestException as e:
        logger.error("HEAD request to %s failed: %s", request.url, e)
        raise HTTPException(status_code=502, detail=str(e))

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=config.HOST, port=config.PORT)
