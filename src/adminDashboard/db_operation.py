'''
Abstraction for reading and saving credentials to the realtime database
'''
import adminDashboard.api as api
import adminDashboard.table_schema as ts
from adminDashboard.models import Credential, load_credentials


def credential_path(cred_key, field=None):
    '''path of a credential record, or of one of its fields'''
    if cred_key not in ts.CREDENTIAL_KEYS:
        raise KeyError(f'unknown credential: {cred_key}')
    if field is None:
        return f'/{cred_key}'
    if field not in ts.CREDENTIAL_SCHEMA:
        raise KeyError(f'unknown credential field: {field}')
    return f'/{cred_key}/{field}'


def get_credentials():
    '''return all four credentials as {cred_key: Credential}'''
    records = {key: api.get_data(credential_path(key))
               for key in ts.CREDENTIAL_KEYS}
    return load_credentials(records)


def get_slots():
    '''return the slot mapping, empty if there is none'''
    slots = api.get_data(f'/{ts.SLOTS_PATH}')
    return slots if slots is not None else {}

