# quotes_api/__main__.py
"""
Run the API with uvicorn on the configured host and port:

    PORT=8080 python -m quotes_api
"""

import uvicorn

from quotes_api.config import get_settings


def main():
    settings = get_settings()
    uvicorn.run(
        "quotes_api:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
