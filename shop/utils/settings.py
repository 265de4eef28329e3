# shop/utils/settings.py
import os
from dotenv import load_dotenv

load_dotenv()

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
CURRENCY_SYMBOL = os.getenv("CURRENCY_SYMBOL", "$")
DEMO_USER_NAME = os.getenv("DEMO_USER_NAME", "Sasha")
DEMO_USER_EMAIL = os.getenv("DEMO_USER_EMAIL", "sasha@example.com")
