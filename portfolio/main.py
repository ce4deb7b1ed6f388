import uvicorn
from .base import create_app
from .core import settings

app = create_app()


def run() -> None:
    uvicorn.run("portfolio.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
