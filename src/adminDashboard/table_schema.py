'''
schema of the credential records stored in the realtime database
'''
CREDENTIAL_KEYS = ['cred1', 'cred2', 'cred3', 'cred4']

SLOTS_PATH = 'slots'

CREDENTIAL_SCHEMA = {
    'belongs_to_slot': str,
    'email': str,
    'password': str,
    'expiry_date': str,
    'locked': int,
    'max_usage': int,
    'usage_count': int,
}

NUMERIC_FIELDS = [name for name, dtype in CREDENTIAL_SCHEMA.items()
                  if dtype is int]

# fields the user can change from the edit view
EDITABLE_FIELDS = [
    'email',
    'password',
    'belongs_to_slot',
    'expiry_date',
    'max_usage',
    'usage_count',
]

UNLOCKED = 0
LOCKED = 1
