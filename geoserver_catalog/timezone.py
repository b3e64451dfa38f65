import pytz

from datetime import datetime

from . import settings

UTC = pytz.utc

TIMEZONE = pytz.timezone(settings.TIME_ZONE)

def get_current_timezone():
    return TIMEZONE

def is_aware(dt):
     return dt.tzinfo is not None and dt.tzinfo.utcoffset(dt) is not None

def localtime(dt=None,timezone=None):
    if timezone is None:
        timezone = get_current_timezone()

    if not dt:
        return datetime.now(tz=timezone)
    elif dt.tzinfo == timezone:
        return dt

    dt = dt.astimezone(timezone)
    if hasattr(timezone, 'normalize'):
        dt = timezone.normalize(dt)
    return dt

def make_aware(dt,timezone=None):
    if timezone is None:
        timezone = get_current_timezone()
    if hasattr(timezone, 'localize'):
        return timezone.localize(dt)
    else:
        return dt.replace(tzinfo=timezone)

def parse_timestamp(value):
    """
    Parse the timestamp used by geoserver in dateCreated and dateModified, for example "2025-06-18 00:47:24.331 UTC"
    Return a datetime in the current timezone, or None if value is empty
    """
    if not value:
        return None
    value = value.strip()
    zone = UTC
    if " " in value:
        dt,zonename = value.rsplit(" ",1)
        if not zonename[0].isdigit():
            value = dt
            zone = pytz.timezone(zonename)
    for pattern in ("%Y-%m-%d %H:%M:%S.%f","%Y-%m-%d %H:%M:%S"):
        try:
            return localtime(make_aware(datetime.strptime(value,pattern),timezone=zone))
        except ValueError:
            continue
    raise ValueError("Unrecognized timestamp({})".format(value))
