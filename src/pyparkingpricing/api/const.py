"""Endpoints of the lot pricing backend."""

LATEST_PRICING_ENDPOINT = "/lotpricing/get-latest-pricing-by-lot-id/{lot_id}"
UPSERT_PRICING_ENDPOINT = "/lotpricing/update-or-create-pricing-by-lot-id/{lot_id}"

ADVANCED_PRICING_ENDPOINT = "/lotadvancedpricing/get-advanced-pricing-by-lot-id/{lot_id}"
ADVANCED_PRICING_UPDATE_ENDPOINT = "/lotadvancedpricing/update-lot-advanced-pricing/{lot_id}"
ADVANCED_PRICING_DELETE_ENDPOINT = "/lotadvancedpricing/delete-all-by-lot-id/{lot_id}"
ADVANCED_SETTINGS_STATE_ENDPOINT = "/lotadvancedpricing/advanced-settings-state/{lot_id}"

AUTH_HEADER = "Authorization"
AUTH_PREFIX = "Bearer "

DEFAULT_HEADERS = {
    "Accept": "application/json",
    "User-Agent": "pyparkingpricing",
}
