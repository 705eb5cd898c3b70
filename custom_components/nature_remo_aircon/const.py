"""Constants for Nature Remo Aircon integration."""

DOMAIN = "nature_remo_aircon"
CONF_APPLIANCE_ID = "appliance_id"
CONF_REFRESH_RATE = "refresh_rate"

DEFAULT_REFRESH_RATE = 60
DEFAULT_API_HOST = "https://api.nature.global/1/"
DEFAULT_NAME = "Aircon"

REQUEST_TIMEOUT_SECONDS = 10

# Vendor vocabulary of the aircon settings endpoint.
BUTTON_POWER_OFF = "power-off"
BUTTON_POWER_ON = ""
MODE_WARM = "warm"
MODE_COOL = "cool"
MODE_AUTO = "auto"
TEMP_UNIT_CELSIUS = "c"
TEMP_UNIT_FAHRENHEIT = "f"

# Used until the device capabilities have been fetched.
FALLBACK_MIN_TEMP = 16
FALLBACK_MAX_TEMP = 30
FALLBACK_TEMP_STEP = 1

SERVICE_SET_TEMPERATURE_DISPLAY_UNIT = "set_temperature_display_unit"
ATTR_UNIT = "unit"
