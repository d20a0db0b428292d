"""Run the API with uvicorn: python -m shiptivity [--host H] [--port P]."""

import argparse

import uvicorn

from shiptivity.config import get_settings


def main() -> None:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Shiptivity API server")
    parser.add_argument("--host", default=settings.host,
                        help="Bind address (use 0.0.0.0 to expose on network)")
    parser.add_argument("--port", type=int, default=settings.port)
    parser.add_argument("--reload", action="store_true")
    args = parser.parse_args()

    uvicorn.run(
        "shiptivity.main:app",
        host=args.host, port=args.port, reload=args.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
