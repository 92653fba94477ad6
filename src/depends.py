from functools import partial
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.adapter.services.html_renderer import JinjaDocumentRenderer
from src.adapter.services.playwright_engine import PlaywrightRenderingEngine
from src.app.services.document_exporter import DocumentExporter
from src.domain.invoice_calculator import InvoiceCalculator

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)


async def get_session() -> AsyncSession:
    async with AsyncSessionLocal() as session:
        yield session


def get_invoice_calculator() -> InvoiceCalculator:
    return InvoiceCalculator(tax_rate=ApplicationConfig.TAX_RATE)


def get_document_renderer() -> JinjaDocumentRenderer:
    return JinjaDocumentRenderer(
        locale=ApplicationConfig.INVOICE_LOCALE,
        currency=ApplicationConfig.INVOICE_CURRENCY,
        brand_name=ApplicationConfig.INVOICE_BRAND_NAME,
        show_item_names=ApplicationConfig.INVOICE_SHOW_ITEM_NAMES,
    )


def get_document_exporter() -> DocumentExporter:
    return DocumentExporter(
        engine_factory=partial(
            PlaywrightRenderingEngine,
            navigation_timeout_ms=ApplicationConfig.PDF_RENDER_TIMEOUT_SECONDS * 1000,
        ),
        timeout=ApplicationConfig.PDF_RENDER_TIMEOUT_SECONDS,
    )
