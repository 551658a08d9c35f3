# apnacart/utils/settings.py
import os
from dotenv import load_dotenv

load_dotenv()

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./apnacart.db")
CART_TTL_SECONDS = int(os.getenv("CART_TTL_SECONDS", 60*60))
CATALOG_SERVICE_URL = os.getenv("CATALOG_SERVICE_URL", "")
ORDER_PHONE = os.getenv("ORDER_PHONE", "919100018181")
STORE_NAME = os.getenv("STORE_NAME", "ApnaCart")
IMAGES_DIR = os.getenv("IMAGES_DIR", os.path.join(os.getcwd(), "public", "images"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
