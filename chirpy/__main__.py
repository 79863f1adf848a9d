"""Serve Chirpy with uvicorn: python -m chirpy"""

import uvicorn

from chirpy.config import settings


def main():
    uvicorn.run("chirpy.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    main()
