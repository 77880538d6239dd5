"""WSGI entry point for the financial calculators application.

Run locally with ``python wsgi.py [--port N]`` or serve ``wsgi:app`` with any
WSGI server.
"""

import argparse
import os

from fincalc import create_app

app = create_app()


def main() -> None:
    parser = argparse.ArgumentParser(description="Run the calculators server")
    parser.add_argument(
        "--port", type=int, default=int(os.environ.get("PORT", 5000))
    )
    parser.add_argument("--host", default="0.0.0.0")
    args = parser.parse_args()

    app.run(debug=app.config["DEBUG"], host=args.host, port=args.port)


if __name__ == "__main__":
    main()
