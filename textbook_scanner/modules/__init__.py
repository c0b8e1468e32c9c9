"""Domain modules. Importing this package registers every table on ``Base.metadata``."""

from .document.models import Document
from .highlight.models import Highlight
from .page.models import Page
from .scan_job.models import ScanJob

TABLES = {
    "TextbookDocuments": Document,
    "TextbookPages": Page,
    "TextbookHighlights": Highlight,
    "ScanJobs": ScanJob,
}

__all__ = ["Document", "Highlight", "Page", "ScanJob", "TABLES"]
