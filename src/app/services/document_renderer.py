"""Document Renderer Interface

Turns an invoice record into self-contained markup. Implementations do no
I/O and know nothing about the engine that later prints the markup.
"""

import logging
from abc import ABC, abstractmethod
from src.domain.errors import DocumentExportError
from src.domain.invoice_record import InvoiceRecord

logger = logging.getLogger(__name__)


class DocumentRenderer(ABC):
    @abstractmethod
    def render(self, record: InvoiceRecord) -> str:
        """
        Render an invoice as an HTML document

        Args:
            record: Invoice to render

        Returns:
            Complete HTML document as a string
        """
        pass


def render_markup(renderer: DocumentRenderer, record: InvoiceRecord) -> str:
    """
    Render a record, reporting any renderer failure as DocumentExportError

    Template and locale errors only show up at render time, after the
    invoice has been saved.
    """
    try:
        return renderer.render(record)
    except Exception as e:
        logger.error(f"Rendering invoice {record.id} failed: {e}")
        raise DocumentExportError(f"Document rendering failed: {e}") from e
