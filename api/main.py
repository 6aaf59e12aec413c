"""
FastAPI Backend for Expense Text Parser
RESTful API endpoints for quick-add phrases and pasted transaction text
"""

from fastapi import FastAPI, File, UploadFile, HTTPException
from fastapi.responses import Response
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel
from pathlib import Path
from datetime import datetime
import tempfile
import logging

from expense_parser.config import config
from expense_parser.extractors import (
    TransactionTextParser,
    complete_semantic_draft,
    parse_semantic_input,
    parse_transaction_text
)
from expense_parser.loaders import DocumentLoadError, load_document
from expense_parser.logging_config import setup_logging
from expense_parser.output import drafts_to_csv

setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Expense Text Parser API",
    description="Turn expense notes and pasted bank notifications into expense records",
    version=config.VERSION
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure appropriately for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class TextRequest(BaseModel):
    text: str


@app.get("/")
async def root():
    """Root endpoint - API information"""
    return {
        "message": "Expense Text Parser API",
        "version": config.VERSION,
        "endpoints": {
            "POST /parse/semantic": "Parse a quick-add phrase",
            "POST /parse/transactions": "Parse pasted notification text",
            "POST /parse/file": "Parse an uploaded .txt or .pdf file",
            "POST /export/csv": "Parse pasted text and download CSV",
            "GET /health": "Health check"
        }
    }


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "timestamp": datetime.now().isoformat()
    }


@app.post("/parse/semantic")
async def parse_semantic(request: TextRequest):
    """
    Parse a quick-add phrase such as "$15 lunch at subway with card".

    Returns the partial draft (absent fields are null) and, when the phrase
    has a positive amount, the completed record with defaults filled in.
    """
    partial = parse_semantic_input(request.text)
    completed = complete_semantic_draft(partial, request.text.strip())
    return {
        "draft": partial.to_dict(),
        "completed": completed.to_dict() if completed else None
    }


@app.post("/parse/transactions")
async def parse_transactions(request: TextRequest):
    """
    Parse pasted notification text, one transaction per line.

    Lines without a positive amount are dropped.
    """
    parser = TransactionTextParser()
    drafts = parser.parse_text(request.text)
    return {
        "status": "success" if drafts else "no_transactions",
        "count": len(drafts),
        "transactions": [draft.to_dict() for draft in drafts],
        "stats": parser.get_stats()
    }


@app.post("/parse/file")
async def parse_file(file: UploadFile = File(..., description="A .txt or .pdf file")):
    """
    Parse transactions from an uploaded text or PDF file.

    - **file**: notification export or statement with a text layer
    """
    content = await file.read()
    is_valid, error = config.validate_file(file.filename or "", len(content))
    if not is_valid:
        status_code = 413 if error and error.startswith("File too large") else 400
        raise HTTPException(status_code=status_code, detail=error)

    suffix = Path(file.filename).suffix.lower()
    with tempfile.TemporaryDirectory() as tmp_dir:
        tmp_path = Path(tmp_dir) / f"upload{suffix}"
        tmp_path.write_bytes(content)
        try:
            text = load_document(str(tmp_path))
        except DocumentLoadError as e:
            logger.error(f"Error loading {file.filename}: {e}")
            raise HTTPException(status_code=400, detail=str(e))

    drafts = parse_transaction_text(text)
    logger.info(f"Parsed {len(drafts)} transactions from {file.filename}")
    return {
        "status": "success" if drafts else "no_transactions",
        "filename": file.filename,
        "count": len(drafts),
        "transactions": [draft.to_dict() for draft in drafts]
    }


@app.post("/export/csv")
async def export_csv(request: TextRequest):
    """Parse pasted text and return the drafts as a CSV download."""
    drafts = parse_transaction_text(request.text)
    filename = f"expenses-{datetime.now().strftime('%Y-%m-%d')}.csv"
    return Response(
        content=drafts_to_csv(drafts),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'}
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=config.API_HOST, port=config.API_PORT)
