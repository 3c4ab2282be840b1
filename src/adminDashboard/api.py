'''
contain method for calls to the firebase realtime database
'''
import logging

import firebase_admin
from firebase_admin import credentials, db

from adminDashboard import settings

logger = logging.getLogger(__name__)


def _initialize_app():
    if not settings.FIREBASE_DATABASE_URL:
        raise Exception(
            'CONFIG_ERROR: FIREBASE_DATABASE_URL is not set, add it to .env')
    if settings.FIREBASE_CREDENTIALS:
        cred = credentials.Certificate(settings.FIREBASE_CREDENTIALS)
    else:
        cred = credentials.ApplicationDefault()
    logger.info('connecting to %s', settings.FIREBASE_DATABASE_URL)
    return firebase_admin.initialize_app(
        cred, {'databaseURL': settings.FIREBASE_DATABASE_URL})


def auth_api(func):
    """
    decorator for function require the firebase app
    """
    def wrapper(*args, **kwargs):

        try:
            firebase_admin.get_app()
        except ValueError:
            _initialize_app()

        result = func(*args, **kwargs)
        return result

    return wrapper


@auth_api
def get_data(path='/'):
    '''
    return the value stored at path, None if nothing is there
    '''
    logger.debug('get %s', path)
    return db.reference(path).get()


@auth_api
def update_data(path, value):
    '''
    overwrite the value stored at path

    Parameters
    ----------
    path: str
        e.g. /cred1 for a whole record or /cred1/locked for one field
    value:
        any json serializable value
    '''
    logger.debug('set %s', path)
    db.reference(path).set(value)
