import os
from dataclasses import dataclass
from typing import Optional

# ================= SETTINGS =================
SERVER_HOST = "127.0.0.1"
SERVER_PORT = 6097
PREFS_FILE = os.environ.get("DROP0X0_PREFS", os.path.join(os.path.expanduser("~"), ".drop0x0.json"))
PREFS_KEY = "backend"

OCTET_STREAM = "application/octet-stream"
UNPRINTABLE = "Data could not be printed"
TEXT_FILENAME = "file.txt"
TEXT_MIME = "text/plain"


@dataclass
class Config:
    timeout: Optional[float] = None  # None keeps httpx's default
    anonymize: bool = False
    prefs_path: str = PREFS_FILE

    @classmethod
    def from_args(cls, args):
        return cls(
            timeout=args.timeout,
            anonymize=args.anonymize,
            prefs_path=args.prefs or PREFS_FILE,
        )
