import os

ITEMS_PER_PAGE = int(os.environ.get("STOREFRONT_ITEMS_PER_PAGE", "20"))

# How many suggestions the product detail view shows
RELATED_COUNT = int(os.environ.get("STOREFRONT_RELATED_COUNT", "4"))

FALLBACK_CATEGORY = "Others"
