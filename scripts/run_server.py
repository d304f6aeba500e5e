from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from src.attendance_tracker.attendance_tracker.core.constants import DEFAULT_PORT
from src.attendance_tracker.attendance_tracker.main import create_app


def main() -> None:
    app = create_app()
    app.run(
        host="0.0.0.0",
        port=int(app.config.get("PORT", DEFAULT_PORT)),
        debug=bool(app.config.get("DEBUG", False)),
        use_reloader=False,
        threaded=True,
    )


if __name__ == "__main__":
    main()
