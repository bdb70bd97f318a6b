"""DealFlip reseller operations API."""
