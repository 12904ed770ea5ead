"""Serve the API with uvicorn: ``python -m blogapi [--host H] [--port P]``."""
from __future__ import annotations

import argparse

import uvicorn


def main() -> None:
    ap = argparse.ArgumentParser(description="Run the blog API")
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--reload", action="store_true", help="Reload on code changes (dev only)")
    args = ap.parse_args()
    uvicorn.run("blogapi.app:create_app", factory=True, host=args.host, port=args.port, reload=args.reload)


if __name__ == "__main__":
    main()
