# Environment variables
ENV_API_KEY = "DD_API_KEY"
ENV_APPLICATION_KEY = "DD_APPLICATION_KEY"
ENV_APP_KEY = "DD_APP_KEY"
ENV_SITE = "DD_SITE"
ENV_DISABLE_SSL_VERIFY = "DD_DISABLE_SSL_VERIFY"

# Headers
HEADER_ACCEPT = "Accept"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_API_KEY = "DD-API-KEY"
HEADER_APPLICATION_KEY = "DD-APPLICATION-KEY"
HEADER_USER_AGENT = "User-Agent"

# Site
DEFAULT_SITE = "datadoghq.com"
