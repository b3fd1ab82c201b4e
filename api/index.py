"""
Serverless Entry Point

Exposes the World Events ASGI app to serverless Python runtimes that
look for handlers under /api. The repository root is put on the import
path because these runtimes do not install the project.
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from backend.api.main import app  # noqa: E402

handler = app
