"""Default paths, environment variable names, and constants."""

from __future__ import annotations

import platformdirs

APP_NAME = "youtube-cli"

CONFIG_DIR = platformdirs.user_config_path(APP_NAME)
CONFIG_FILE = CONFIG_DIR / "config.toml"

# Environment variable names
ENV_API_KEY = "YOUTUBE_API_KEY"
ENV_PROFILE = "YOUTUBE_PROFILE"

# API defaults
DEFAULT_BASE_URL = "https://www.googleapis.com/youtube/v3"
DEFAULT_TIMEOUT = 30.0

# Hard upper bound on maxResults for every list endpoint
MAX_PAGE_SIZE = 50
