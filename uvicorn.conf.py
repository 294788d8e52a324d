from visitdesk.core.config import get_settings

settings = get_settings()

app = "visitdesk.main:app"
host = settings.BACKEND_HOST
port = settings.BACKEND_PORT
log_level = "debug" if settings.DEBUG else "info"
# Sessions and the request collection live in process memory.
workers = 1
