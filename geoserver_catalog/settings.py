import os

DEBUG = os.environ.get("DEBUG","false").lower() == "true"

def GET_REQUEST_HEADERS(name):
    """
    Parse the request headers from environment variable 'name'
    format: header1=value1,header2=value2
    Return None if not configured
    """
    headers = os.environ.get(name)
    if not headers:
        return None
    return dict([(header.strip().split("=",1) if "=" in header else [header.strip(),""]) for header in headers.split(",") if header.strip()])

GEOSERVER_URL = os.environ.get("GEOSERVER_URL")
GEOSERVER_USER = os.environ.get("GEOSERVER_USER") or "admin"
GEOSERVER_PASSWORD = os.environ.get("GEOSERVER_PASSWORD") or "geoserver"
GEOSERVER_SSL_VERIFY = os.environ.get("GEOSERVER_SSL_VERIFY","true").lower() == "true"
GEOSERVER_REQUEST_HEADERS = GET_REQUEST_HEADERS("GEOSERVER_REQUEST_HEADERS")

GEOSERVER = {
    "url": GEOSERVER_URL,
    "user": GEOSERVER_USER,
    "password": GEOSERVER_PASSWORD,
    "headers": GEOSERVER_REQUEST_HEADERS,
    "ssl_verify": GEOSERVER_SSL_VERIFY
}

REQUEST_TIMEOUT = int(os.environ.get("REQUEST_TIMEOUT",5))
UPLOAD_TIMEOUT = int(os.environ.get("UPLOAD_TIMEOUT",600))

TIME_ZONE = os.environ.get("TZ") or "UTC"
