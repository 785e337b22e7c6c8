import logging
import sys

import uvicorn

from app.config import settings
from app.init_db import initialize_database
from app.main import create_app


def main() -> int:
    app = create_app(settings)
    try:
        initialize_database(app.state.engine)
    except Exception:
        logging.exception("Failed to start server")
        return 1
    app.state.database_ready = True

    logging.info(f"Server is running on port {settings.PORT}")
    logging.info(f"API available at http://localhost:{settings.PORT}/api/posts")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())
    return 0


if __name__ == "__main__":
    sys.exit(main())
