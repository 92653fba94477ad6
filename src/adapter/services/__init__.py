from .unit_of_work import SqlAlchemyUnitOfWork
from .html_renderer import JinjaDocumentRenderer
from .playwright_engine import PlaywrightRenderingEngine

__all__ = [
    "SqlAlchemyUnitOfWork",
    "JinjaDocumentRenderer",
    "PlaywrightRenderingEngine",
]
