from __future__ import annotations

import argparse
import sys

from sports_radar.data.loaders import DEFAULT_DATA_SOURCE
from sports_radar.utils.log import DEFAULT_LOG_PATH, set_log_path


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="sports-radar", description="Sortable sports table with a radar profile view.")
    parser.add_argument("--data", default=DEFAULT_DATA_SOURCE, help="CSV path or http(s) URL")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8050)
    parser.add_argument("--debug", dest="debug", action="store_true", default=False)
    parser.add_argument("--no-debug", dest="debug", action="store_false")
    parser.add_argument("--log-file", default=str(DEFAULT_LOG_PATH))
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(list(sys.argv[1:] if argv is None else argv))
    set_log_path(args.log_file)

    from sports_radar.ui.dash_app import main as dash_main

    dash_main(
        data_source=args.data,
        host=args.host,
        port=args.port,
        debug=args.debug,
        use_reloader=False,
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
