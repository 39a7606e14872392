from __future__ import annotations

import os
from pathlib import Path

# Directories default to paths relative to the working directory of the service
JOBS_DIR = Path(os.environ.get("IMAGE_COMBINER_JOBS_DIR", "jobs"))
WORK_DIR = Path(os.environ.get("IMAGE_COMBINER_WORK_DIR", "work"))
PREVIEW_MAX_WIDTH = int(os.environ.get("IMAGE_COMBINER_PREVIEW_MAX_WIDTH", "512"))
CORS_ORIGINS = [o.strip() for o in os.environ.get("IMAGE_COMBINER_CORS_ORIGINS", "*").split(",") if o.strip()]
