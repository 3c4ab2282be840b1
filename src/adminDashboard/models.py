'''
credential record as stored under /cred1 .. /cred4
'''
from dataclasses import dataclass, fields, replace
from typing import Dict, List, Optional

from adminDashboard.table_schema import CREDENTIAL_KEYS, CREDENTIAL_SCHEMA, UNLOCKED


@dataclass(frozen=True)
class Credential:
    """
    One of the four managed credentials

    Attributes:
        belongs_to_slot: key of the slot this credential is assigned to
        email: login email
        password: login password, stored and shown in plain text
        expiry_date: YYYY-MM-DD, not validated
        locked: 0 unlocked, 1 locked
        max_usage: allowed number of uses
        usage_count: number of uses so far, may exceed max_usage
    """

    belongs_to_slot: str = ''
    email: str = ''
    password: str = ''
    expiry_date: str = ''
    locked: int = UNLOCKED
    max_usage: int = 0
    usage_count: int = 0

    @property
    def is_locked(self) -> bool:
        return self.locked != UNLOCKED

    def with_field(self, field: str, value) -> "Credential":
        """Return a copy with one field replaced"""
        if field not in CREDENTIAL_SCHEMA:
            raise KeyError(f'unknown credential field: {field}')
        return replace(self, **{field: value})

    def to_dict(self) -> dict:
        """Convert to the json written to the database"""
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "Credential":
        """Create from a database record, missing fields take defaults"""
        data = data or {}
        values = {}
        for name, dtype in CREDENTIAL_SCHEMA.items():
            if data.get(name) is None:
                continue
            value = data[name]
            # the store may hand back 1.0 for 1
            if dtype is int and isinstance(value, float) and value.is_integer():
                value = int(value)
            values[name] = value
        return cls(**values)


def _as_credential(value):
    if isinstance(value, Credential):
        return value
    return Credential.from_dict(value)


def load_credentials(raw: Optional[dict]) -> Dict[str, Credential]:
    '''
    coerce a raw database snapshot into the four credential records

    Parameters
    ----------
    raw: dict
        {cred_key: record or Credential}, usually the database root

    Returns
    -------
    dict
        {cred_key: Credential} for every key in CREDENTIAL_KEYS,
        missing keys get an empty record
    '''
    raw = raw or {}
    return {key: _as_credential(raw.get(key)) for key in CREDENTIAL_KEYS}


def slot_options(slots) -> List[str]:
    '''keys of the slot mapping in stored order'''
    if slots is None:
        return []
    # the realtime database returns numbered keys as a list
    if isinstance(slots, list):
        return [str(index) for index, slot in enumerate(slots) if slot is not None]
    return list(slots.keys())
