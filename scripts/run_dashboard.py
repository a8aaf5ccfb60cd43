"""
jaildash Launcher

Starts the jail dashboard from a source checkout without installing it.

Architecture:
-------------
- Flask web server (port 8000)
- Background jail poller (polls the management API every 30s)
- In-memory snapshot shared by both, nothing stored on disk

Usage:
------
python scripts/run_dashboard.py freenas.local 80 -P secret

Environment Variables:
----------------------
JAILDASH_PASSWORD: Web UI password (instead of -P)
JAILDASH_BIND_HOST: Flask bind address (default: localhost)
JAILDASH_BIND_PORT: Flask server port (default: 8000)
JAILDASH_POLL_INTERVAL: Seconds between refreshes (default: 30)
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from jaildash.cli import main


if __name__ == "__main__":
    main()
