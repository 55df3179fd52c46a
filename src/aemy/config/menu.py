import os


class Menu:
    def __init__(self, config: dict | None = None) -> None:
        cfg = (config or {}).get("aemy", {}).get("menu", {})
        self.BOT_NAME: str = str(cfg.get("bot_name", os.getenv("BOT_NAME", "Aemy")))
        self.THUMBNAIL_PATH: str = str(cfg.get("thumbnail_path", os.getenv("MENU_THUMBNAIL_PATH", "config/thumbnail.png")))
        self.THUMBNAIL_URL: str = str(
            cfg.get(
                "thumbnail_url",
                os.getenv(
                    "MENU_THUMBNAIL_URL",
                    "https://raw.githubusercontent.com/seaavey/Aemy-go/refs/heads/main/config/thumbnail.png",
                ),
            )
        )
        self.SOURCE_URL: str = str(cfg.get("source_url", os.getenv("MENU_SOURCE_URL", "https://github.com/seaavey/Aemy-go")))
