import os
import sys
import traceback

ROOT_DIR = os.path.dirname(__file__)
SRC_DIR = os.path.join(ROOT_DIR, "src")
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

from sports_radar.ui.dash_app import main


if __name__ == "__main__":
    data_source = sys.argv[1] if len(sys.argv) > 1 else "sports.csv"
    try:
        print(f"Starting Sports Radar on http://127.0.0.1:8050 with {data_source} ...")
        main(data_source=data_source, debug=True)
    except Exception as exc:
        print(f"Sports Radar failed to start: {type(exc).__name__}: {exc}")
        print("If dependencies are missing, install: pip install -e .")
        traceback.print_exc()
        raise
