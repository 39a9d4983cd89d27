"""CLI entry point for the findingdesk API server."""

import argparse
import os


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="findingdesk-server",
        description="findingdesk API server: supplier finding editor",
    )
    parser.add_argument("--host", default="0.0.0.0", help="Bind host (default: 0.0.0.0)")
    parser.add_argument("--port", type=int, default=8080, help="Bind port (default: 8080)")
    parser.add_argument(
        "--database-url",
        default=None,
        help="Override FINDINGDESK_DATABASE_URL",
    )
    args = parser.parse_args(argv)

    if args.database_url:
        os.environ["FINDINGDESK_DATABASE_URL"] = args.database_url

    import uvicorn

    uvicorn.run("findingdesk.main:app", host=args.host, port=args.port)


if __name__ == "__main__":
    main()
