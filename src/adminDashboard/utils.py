import datetime

from adminDashboard import settings
from adminDashboard.table_schema import LOCKED, UNLOCKED


def parse_date(date_string):
    '''
    parse a stored YYYY-MM-DD string, None if it is not a valid date
    '''
    if not isinstance(date_string, str):
        return None
    try:
        return datetime.datetime.strptime(date_string, settings.DATE_FORMAT).date()
    except ValueError:
        return None


def serialize_date(date):
    '''date -> YYYY-MM-DD'''
    return date.strftime(settings.DATE_FORMAT)


def format_date(date_string):
    '''
    human readable expiry date, e.g. 2024-05-01 -> May 01, 2024

    the raw string is returned unchanged when it cannot be parsed
    '''
    date = parse_date(date_string)
    if date is None:
        return date_string
    return date.strftime(settings.DISPLAY_DATE_FORMAT)


def parse_int(value):
    '''
    parse user input as an integer

    Returns
    -------
    int or None
        None when value is empty or not an integer
    '''
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def flip_lock(locked):
    '''the lock value a toggle proposes'''
    return LOCKED if locked == UNLOCKED else UNLOCKED


def lock_verb(locked):
    '''"lock" for LOCKED, "unlock" for UNLOCKED'''
    return 'lock' if locked == LOCKED else 'unlock'
