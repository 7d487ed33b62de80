"""Organizer API entrypoint.

Run with:
  python -m organizer
"""

import uvicorn

from organizer.config import settings


def main() -> None:
    uvicorn.run("organizer.main:app", host=settings.HOST, port=settings.PORT, reload=settings.DEBUG)


if __name__ == "__main__":
    main()
