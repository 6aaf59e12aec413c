"""
Text Loader Module
Reads notification/statement text from .txt files and from the text layer of
.pdf files (PyMuPDF). Scanned PDFs without a text layer are not supported.
"""

import fitz  # PyMuPDF
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class DocumentLoadError(Exception):
    """Custom exception for document loading errors."""
    pass


def load_text_file(file_path: str) -> str:
    """
    Read a UTF-8 text file.

    Raises:
        DocumentLoadError: If the file is missing or not valid UTF-8
    """
    text_path = Path(file_path)
    if not text_path.exists():
        logger.error(f"Text file not found: {file_path}")
        raise DocumentLoadError(f"Text file not found: {file_path}")

    try:
        text = text_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        logger.error(f"Text file is not valid UTF-8: {file_path}")
        raise DocumentLoadError(f"Text file is not valid UTF-8: {file_path}") from e
    except OSError as e:
        logger.error(f"Cannot read text file {file_path}: {e}", exc_info=True)
        raise DocumentLoadError(f"Failed to read {file_path}: {str(e)}") from e

    logger.info(f"Loaded text file: {file_path} ({len(text)} characters)")
    return text


def load_pdf(file_path: str) -> str:
    """
    Extract text from all pages of a PDF file.

    Args:
        file_path: Path to the PDF file

    Returns:
        Combined text from all pages as a single string

    Raises:
        DocumentLoadError: If the PDF cannot be loaded or has no text
    """
    pdf_path = Path(file_path)
    if not pdf_path.exists():
        logger.error(f"PDF file not found: {file_path}")
        raise DocumentLoadError(f"PDF file not found: {file_path}")

    if not pdf_path.suffix.lower() == '.pdf':
        logger.error(f"File is not a PDF: {file_path}")
        raise DocumentLoadError(f"File is not a PDF: {file_path}")

    doc = None
    try:
        doc = fitz.open(file_path)

        if doc.page_count == 0:
            logger.error(f"PDF has no pages: {file_path}")
            raise DocumentLoadError(f"PDF has no pages: {file_path}")

        logger.info(f"Loading PDF: {file_path} ({doc.page_count} pages)")

        text_chunks = []
        empty_pages = 0

        for page_num in range(doc.page_count):
            text = doc[page_num].get_text()
            if text.strip():
                text_chunks.append(text)
                logger.debug(f"Page {page_num + 1}: extracted {len(text)} characters")
            else:
                empty_pages += 1
                logger.warning(f"Page {page_num + 1}: empty or no extractable text")

        if not text_chunks:
            raise DocumentLoadError(f"No text could be extracted from PDF: {file_path}")

        combined_text = "\n".join(text_chunks)

        logger.info(
            f"Extraction complete: {len(combined_text)} characters from "
            f"{len(text_chunks)} pages ({empty_pages} empty pages skipped)"
        )

        return combined_text

    except fitz.FileDataError as e:
        logger.error(f"Invalid or corrupted PDF file: {file_path}", exc_info=True)
        raise DocumentLoadError(f"Invalid or corrupted PDF file: {file_path}") from e

    except DocumentLoadError:
        raise

    except Exception as e:
        logger.error(f"Unexpected error loading PDF {file_path}: {e}", exc_info=True)
        raise DocumentLoadError(f"Failed to load PDF {file_path}: {str(e)}") from e

    finally:
        if doc is not None:
            doc.close()
            logger.debug(f"PDF document closed: {file_path}")


def load_document(file_path: str) -> str:
    """
    Load raw text from a .txt or .pdf file, chosen by extension.

    Raises:
        DocumentLoadError: For unsupported extensions or unreadable files
    """
    suffix = Path(file_path).suffix.lower()
    if suffix == '.pdf':
        return load_pdf(file_path)
    if suffix == '.txt':
        return load_text_file(file_path)

    logger.error(f"Unsupported file type '{suffix}': {file_path}")
    raise DocumentLoadError(f"Unsupported file type '{suffix}'. Use .txt or .pdf")
