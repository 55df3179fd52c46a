import logging
import os
from typing import List

from .loader import as_bool, section, split_list

logger = logging.getLogger(__name__)


class Core:
    def __init__(self, config: dict | None = None) -> None:
        cfg = section(config, "core")

        prefixes_cfg = cfg.get("prefixes")
        if prefixes_cfg is not None:
            self.PREFIXES: List[str] = [str(p) for p in prefixes_cfg if str(p)]
        else:
            self.PREFIXES = split_list(os.getenv("PREFIXES", "!,."))

        owners_cfg = cfg.get("owners")
        if owners_cfg is not None:
            self.OWNERS: List[str] = [str(o).strip() for o in owners_cfg if str(o).strip()]
        else:
            self.OWNERS = split_list(os.getenv("OWNERS", ""))

        # Only owners (and the bot's own account) may trigger commands
        self.SELF_MODE: bool = as_bool(cfg.get("self_mode", os.getenv("SELF_MODE", "0")))
        # Mark status@broadcast updates as read as they arrive
        self.READ_STATUS: bool = as_bool(cfg.get("read_status", os.getenv("READ_STATUS", "0")))

        blocked_cfg = cfg.get("blocked_servers")
        if blocked_cfg is not None:
            self.BLOCKED_SERVERS: List[str] = [str(s) for s in blocked_cfg]
        else:
            self.BLOCKED_SERVERS = split_list(os.getenv("BLOCKED_SERVERS", "newsletter,broadcast"))

        self.SESSION_DB: str = str(cfg.get("session_db", os.getenv("SESSION_DB", "session.db")))
        self.QR_PATH: str = str(cfg.get("qr_path", os.getenv("QR_PATH", "qrcode.png")))
        self.TIMEZONE: str = str(cfg.get("timezone", os.getenv("TIMEZONE", "Asia/Jakarta")))
        self.EXEC_TIMEOUT: float = float(cfg.get("exec_timeout", os.getenv("EXEC_TIMEOUT", "60")))

        if not self.PREFIXES:
            raise ValueError("Missing command prefixes: set PREFIXES or [aemy.core].prefixes")
