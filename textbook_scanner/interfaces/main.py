from ..infrastructure.app_factory import create_application
from ..infrastructure.config.settings import get_settings
from ..interfaces.api import router as api_router

settings = get_settings()

app = create_application(
    router=api_router,
    settings=settings,
    title="Textbook Scanner API",
    summary="Actions for scanned textbooks, their pages, highlights and scan jobs",
    description="""
    # Textbook Scanner API

    Every operation is a `POST /api/v1/actions/<name>` call taking one JSON
    object and returning one JSON object. Field names are camelCase.

    * **Documents**: `createDocument`, `updateDocument`, `listDocuments`, `getDocumentWithPages`
    * **Pages**: `savePage`, `deletePage`
    * **Highlights**: `saveHighlight`, `deleteHighlight`
    * **Scan jobs**: `createScanJob`, `listScanJobs`

    All operations act on behalf of the signed-in user and only ever see
    that user's documents. Errors carry a `code` of `VALIDATION`,
    `UNAUTHORIZED` or `NOT_FOUND` and a `detail` message.
    """,
)
