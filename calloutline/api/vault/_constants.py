"""Vault constants."""

LOG_DOMAIN = "vault"

FRONTMATTER_DELIMITER = "---"
FENCE_MARKERS = ("```", "~~~")
