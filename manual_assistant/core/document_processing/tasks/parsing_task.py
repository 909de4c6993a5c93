"""
Document parsing task using LangChain PyPDFLoader.

Extracts the full text of a PDF manual.

Dependencies: langchain_community.document_loaders
System role: First stage of manual indexing
"""

import logging
from pathlib import Path

from langchain_community.document_loaders import PyPDFLoader

from manual_assistant.core.exceptions import DocumentReadError

logger = logging.getLogger(__name__)

PAGE_SEPARATOR = "\n\n"


class ParsingTask:
    """Extract text from PDF documents."""

    def __init__(self, page_separator: str = PAGE_SEPARATOR) -> None:
        """
        Initialize parsing task.

        Args:
            page_separator: Text inserted between consecutive pages
        """
        self._page_separator = page_separator

    def extract_text(self, file_path: str) -> str:
        """
        Read a PDF fully and return its text.

        Args:
            file_path: Path to PDF document

        Returns:
            str: Page texts joined in page order

        Raises:
            DocumentReadError: When the file is missing, not a PDF or unparsable
        """
        path = Path(file_path)
        if not path.is_file():
            raise DocumentReadError(f"File not found: {file_path}", path=file_path)

        if path.suffix.lower() != ".pdf":
            raise DocumentReadError(
                f"Unsupported file format: {path.suffix}. Only PDF files are supported.",
                path=file_path,
            )

        try:
            pages = PyPDFLoader(str(path)).load()
        except Exception as e:
            raise DocumentReadError(f"Failed to parse PDF: {e}", path=file_path) from e

        if not pages:
            raise DocumentReadError("PDF document contains no pages", path=file_path)

        text = self._page_separator.join(page.page_content for page in pages)
        if not text.strip():
            logger.warning(f"{__name__}:extract_text - No extractable text in {file_path}")

        logger.info(
            f"{__name__}:extract_text - Extracted {len(text)} characters "
            f"from {len(pages)} pages of {file_path}"
        )
        return text
