import os


class Downloader:
    def __init__(self, config: dict | None = None) -> None:
        cfg = (config or {}).get("aemy", {}).get("downloader", {})
        self.API_BASE_URL: str = str(
            cfg.get("api_base_url", os.getenv("API_BASE_URL", "https://api.seaavey.my.id/api"))
        ).rstrip("/")
        self.REQUEST_TIMEOUT: float = float(cfg.get("request_timeout", os.getenv("REQUEST_TIMEOUT", "30")))
        # HEAD-style content-type probes use a shorter budget
        self.PROBE_TIMEOUT: float = float(cfg.get("probe_timeout", os.getenv("PROBE_TIMEOUT", "10")))
