# core/config.py
# Configures core app behaviours via the .env file.  None of these are required; the defaults match the
# behaviour users expect out of the box.  Nothing here is ever written back.

import os
from dotenv import load_dotenv

load_dotenv()

LOG_LEVEL                       =       os.getenv("LOG_LEVEL",                       "WARNING").upper()
FONT_PROVIDER                   =       os.getenv("FONT_PROVIDER",                      "auto").lower()
FC_LIST_TIMEOUT                 = float(os.getenv("FC_LIST_TIMEOUT",                        10))

DEFAULT_SAMPLE_TEXT             =       os.getenv("DEFAULT_SAMPLE_TEXT",
                                                  "The quick brown fox jumps over the lazy dog")
DEFAULT_PREVIEW_SIZE            =   int(os.getenv("DEFAULT_PREVIEW_SIZE",                   24))
MIN_PREVIEW_SIZE                =   int(os.getenv("MIN_PREVIEW_SIZE",                        8))
MAX_PREVIEW_SIZE                =   int(os.getenv("MAX_PREVIEW_SIZE",                       96))

GRID_TILE_WIDTH                 =   int(os.getenv("GRID_TILE_WIDTH",                       220))
TOAST_DURATION                  =   int(os.getenv("TOAST_DURATION",                       1500))

if not MIN_PREVIEW_SIZE <= DEFAULT_PREVIEW_SIZE <= MAX_PREVIEW_SIZE:
    raise ValueError(
        f"DEFAULT_PREVIEW_SIZE {DEFAULT_PREVIEW_SIZE} outside {MIN_PREVIEW_SIZE}..{MAX_PREVIEW_SIZE}"
    )
