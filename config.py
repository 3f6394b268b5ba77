import os

from dotenv import load_dotenv
load_dotenv()

BASE_URL = os.getenv("SAUCE_BASE_URL", "https://www.saucedemo.com").rstrip("/")
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./sauce_monitor.db")
SCREENSHOT_DIR = os.getenv("SCREENSHOT_DIR", "screenshots")
LOG_DIR = os.getenv("LOG_DIR", "logs")

# Liczba równolegle uruchomionych scenariuszy (osobne konteksty przeglądarki)
WORKERS = int(os.getenv("SAUCE_WORKERS", "2"))
HEADLESS = os.getenv("SAUCE_HEADLESS", "1").lower() not in ("0", "false", "no")

# Viewport jak w executorze, desktop
VIEWPORT = {'width': 1280, 'height': 720}
