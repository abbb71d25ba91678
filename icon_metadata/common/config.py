#!/usr/bin/env python3

import os
import dotenv

dotenv.load_dotenv()

# Icon location, relative to the repository root
WEB_DIR_NAME = "web"
WEB_CURRENT_DIR_NAME = "current"
SERVER_ICON_FILE_NAME = "server-icon.png"

REPORT_TEMPLATE = (
    "Icon Metadata: {width}x{height}, format: {format}, "
    "depth: {depth}, channels: {channels}"
)
FAILURE_PREFIX = "Failed to read metadata:"

# auto | always | never
LOG_COLOR = os.getenv("LOG_COLOR", "auto")
NO_COLOR = os.getenv("NO_COLOR") is not None
