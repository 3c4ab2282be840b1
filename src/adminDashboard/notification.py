import logging

import panel as pn

from adminDashboard import settings

logger = logging.getLogger(__name__)

NOTIFICATION_TYPES = ('success', 'error', 'warning', 'info')


def send(notification):
    '''
    show one notification dict as a toast

    Parameters
    ----------
    notification: dict
        {'type': 'success' | 'error' | 'warning' | 'info',
         'description': str,
         'duration': int, optional, ms, 0 keeps it until dismissed}
    '''
    kind = notification['type']
    if kind not in NOTIFICATION_TYPES:
        raise Exception('unknow notification type')
    duration = notification.get('duration', settings.NOTIFICATION_DURATION)
    area = pn.state.notifications
    # no browser session, e.g. when run from a script
    if area is None:
        logger.info('%s: %s', kind, notification['description'])
        return
    getattr(area, kind)(notification['description'], duration=duration)


def notify(func):
    '''
    run a handler that yields notification dicts and show each of them,
    any exception raised by the handler is shown as an error that stays
    until dismissed
    '''
    def wrapper(*args, **kwargs):
        try:
            notifications = func(*args, **kwargs)

            if notifications is not None:
                for notification in notifications:
                    send(notification)
        except Exception as e:
            logger.exception('handler %s failed', func.__name__)
            send({'type': 'error', 'description': str(e), 'duration': 0})
    return wrapper
