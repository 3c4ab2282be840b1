'''
edit/lock state machine behind the credentials panel

Only one credential can be edited at a time, the mode is either
Viewing() or Editing(key). User input only touches the working copy,
the committed copy holds what the database has acknowledged and is what
cancel restores.

Every write goes through _commit: the value is recorded as pending, the
writer is called, and the change is applied locally only once the write
returned. A rejected write is logged and reported, it never propagates.
'''
import logging
import threading
from dataclasses import dataclass
from typing import Any, Callable, Dict, List

import param

import adminDashboard.api as api
import adminDashboard.table_schema as ts
from adminDashboard.db_operation import credential_path
from adminDashboard.models import Credential, load_credentials, slot_options
from adminDashboard.utils import flip_lock, lock_verb, parse_int, serialize_date

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Viewing:
    '''no credential is being edited'''


@dataclass(frozen=True)
class Editing:
    key: str


@dataclass(frozen=True)
class Confirmation:
    '''a lock toggle waiting for the user to confirm'''

    key: str
    locked: int

    @property
    def title(self) -> str:
        return f'{lock_verb(self.locked).capitalize()} {self.key}'

    @property
    def description(self) -> str:
        return f'Are you sure you want to {lock_verb(self.locked)} {self.key}?'


@dataclass(frozen=True)
class PendingWrite:
    key: str
    path: str
    value: Any


class CredentialEditor(param.Parameterized):
    '''
    state of the credentials panel

    Parameters
    ----------
    credentials: dict
        {cred_key: record or Credential}, the snapshot read at session start
    slots: dict
        slot mapping, only its keys are used
    write: callable
        write(path, value), defaults to api.update_data
    '''

    mode = param.ClassSelector(class_=(Viewing, Editing), default=Viewing())
    working = param.Dict(default={})
    committed = param.Dict(default={})
    confirmation = param.ClassSelector(
        class_=Confirmation, default=None, allow_None=True)
    pending = param.ClassSelector(
        class_=PendingWrite, default=None, allow_None=True)
    slots = param.List(default=[])

    def __init__(self, credentials, slots=None, write: Callable = None, **params):
        super().__init__(**params)
        self._write = write if write is not None else api.update_data
        self._write_lock = threading.Lock()
        self.committed = load_credentials(credentials)
        self.working = dict(self.committed)
        self.slots = slot_options(slots)

    @property
    def credential_keys(self) -> List[str]:
        return list(ts.CREDENTIAL_KEYS)

    @property
    def editing_key(self):
        return self.mode.key if isinstance(self.mode, Editing) else None

    def is_editing(self, key) -> bool:
        return self.editing_key == key

    def credential(self, key) -> Credential:
        '''working copy of a credential'''
        self._check_key(key)
        return self.working[key]

    def _check_key(self, key):
        if key not in self.working:
            raise KeyError(f'unknown credential: {key}')

    def _require_editing(self, key):
        self._check_key(key)
        if not self.is_editing(key):
            raise ValueError(f'{key} is not being edited')

    def _set_working(self, key, credential):
        self.working = {**self.working, key: credential}

    def _set_committed(self, key, credential):
        self.committed = {**self.committed, key: credential}

    def _discard(self, key):
        self._set_working(key, self.committed[key])

    def begin_edit(self, key):
        '''
        start editing key, unsaved changes of the credential being edited
        before are thrown away
        '''
        self._check_key(key)
        current = self.editing_key
        if current == key:
            return
        if current is not None:
            logger.info('discarding unsaved changes of %s', current)
            self._discard(current)
        self.mode = Editing(key)

    def cancel_edit(self):
        current = self.editing_key
        if current is None:
            return
        self._discard(current)
        self.mode = Viewing()

    def set_field(self, key, field, value) -> List[Dict]:
        '''
        change one field of the credential being edited

        Returns
        -------
        list
            notifications for the user, empty when the change was applied
        '''
        self._require_editing(key)
        if field not in ts.EDITABLE_FIELDS:
            raise KeyError(f'{field} cannot be edited')
        if field in ts.NUMERIC_FIELDS:
            parsed = parse_int(value)
            if parsed is None:
                return [{'type': 'warning',
                         'description': f'{field} must be a whole number'}]
            value = parsed
        self._set_working(key, self.working[key].with_field(field, value))
        return []

    def select_expiry_date(self, key, date) -> List[Dict]:
        '''set expiry_date from a date picked in the calendar'''
        if date is None:
            return []
        return self.set_field(key, 'expiry_date', serialize_date(date))

    def _busy(self):
        return {'type': 'warning',
                'description': 'another change is still being saved, try again'}

    def _commit(self, key, path, value, apply: Callable[[], None]):
        '''
        Returns
        -------
        True when written and applied, False when the write was rejected,
        None when another write holds the lock and nothing was sent
        '''
        # callbacks may run on several threads when pn.config.nthreads is set
        if not self._write_lock.acquire(blocking=False):
            return None
        try:
            self.pending = PendingWrite(key, path, value)
            try:
                self._write(path, value)
            except Exception:
                logger.exception('writing %s failed', path)
                return False
            finally:
                self.pending = None
            apply()
            return True
        finally:
            self._write_lock.release()

    def save(self, key):
        '''
        write the whole working record of key, yields notification dicts
        '''
        self._require_editing(key)
        if self.pending is not None:
            yield self._busy()
            return
        credential = self.working[key]

        def apply():
            self._set_committed(key, credential)
            self.mode = Viewing()

        written = self._commit(key, credential_path(key), credential.to_dict(), apply)
        if written is None:
            yield self._busy()
        elif written:
            yield {'type': 'success', 'description': f'{key} updated successfully'}
        else:
            yield {'type': 'error', 'description': f'Failed to update {key}'}

    def request_lock_toggle(self, key) -> Confirmation:
        '''ask for confirmation before flipping the lock of key'''
        self._check_key(key)
        self.confirmation = Confirmation(
            key=key, locked=flip_lock(self.working[key].locked))
        return self.confirmation

    def dismiss(self):
        self.confirmation = None

    def confirm(self):
        '''
        write the lock value waiting for confirmation, yields notification
        dicts
        '''
        confirmation = self.confirmation
        if confirmation is None:
            return
        if self.pending is not None:
            yield self._busy()
            return
        self.confirmation = None
        key, locked = confirmation.key, confirmation.locked

        def apply():
            self._set_working(key, self.working[key].with_field('locked', locked))
            self._set_committed(key, self.committed[key].with_field('locked', locked))

        verb = lock_verb(locked)
        written = self._commit(key, credential_path(key, 'locked'), locked, apply)
        if written is None:
            # keep the dialog open so the user can confirm again
            self.confirmation = confirmation
            yield self._busy()
        elif written:
            yield {'type': 'success', 'description': f'{key} {verb}ed successfully'}
        else:
            yield {'type': 'error', 'description': f'Failed to {verb} {key}'}
