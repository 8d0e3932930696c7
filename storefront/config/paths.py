import os

# storefront/config/paths.py

CONFIG_DIR = os.path.dirname(os.path.abspath(__file__))      # .../storefront/config
PACKAGE_DIR = os.path.dirname(CONFIG_DIR)                    # .../storefront
PROJECT_ROOT = os.path.dirname(PACKAGE_DIR)                  # .../repository root

DATA_DIR = os.environ.get("STOREFRONT_DATA_DIR", os.path.join(PROJECT_ROOT, "data"))

PRODUCTS_PATH = os.environ.get("STOREFRONT_PRODUCTS_PATH", os.path.join(DATA_DIR, "products.json"))
