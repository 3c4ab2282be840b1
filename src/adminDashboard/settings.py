import os
import dotenv
dotenv.load_dotenv()

# realtime database
FIREBASE_DATABASE_URL = os.getenv('FIREBASE_DATABASE_URL')
# service account json, fall back to application default credentials if unset
FIREBASE_CREDENTIALS = os.getenv('FIREBASE_CREDENTIALS')

DATE_FORMAT = '%Y-%m-%d'
DISPLAY_DATE_FORMAT = '%b %d, %Y'

# px scrolled before the header turns frosted
SCROLL_THRESHOLD = 10

# ms
NOTIFICATION_DURATION = 4000
