# config.py
# Tunable defaults (one place) and logging settings.

import os
from dataclasses import dataclass, field

# Logging settings
LOG_LEVEL = os.getenv("BLOBTRACE_LOG_LEVEL", "WARNING")
LOG_FORMAT = os.getenv("BLOBTRACE_LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")

@dataclass
class Settings:
    # Contour buffer: capacity on first growth, doubled afterwards
    CONTOUR_CAPACITY: int = 32

    # Label grid cells are int16
    LABEL_MAX: int = 32767
    COORD_MAX: int = 32767

    # Scanner
    EXTRACT_INTERNAL: bool = True

    # Demo CLI
    THRESHOLD: int = 128
    PALETTE: tuple = field(default_factory=lambda: (
        (0xff, 0x00, 0x00),
        (0x00, 0xff, 0x00),
        (0xff, 0xff, 0x00),
        (0x00, 0x00, 0xff),
        (0xff, 0x00, 0xff),
        (0x00, 0xff, 0xff),
        (0xff, 0xff, 0xff),
        (0x7f, 0x00, 0x7f),
    ))

S = Settings()
