from .unit_of_work import UnitOfWork
from .document_renderer import DocumentRenderer
from .rendering_engine import RenderingEngine
from .document_exporter import DocumentExporter

__all__ = [
    "UnitOfWork",
    "DocumentRenderer",
    "RenderingEngine",
    "DocumentExporter",
]
