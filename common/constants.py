XPATH_ENGINE_PREFIX = "xpath="
CSS_ENGINE_PREFIX = "css="

DEFAULT_BROWSER = "chromium"
DEFAULT_TIMEOUT = 30000
BASE_URL_ENV_VARIABLE = "VUE_DEV_SERVER_URL"
