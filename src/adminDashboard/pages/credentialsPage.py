import html
import logging

import panel as pn

import adminDashboard.api as api
import adminDashboard.db_operation as db
from adminDashboard.components import credentialsPanel, header
from adminDashboard.editor import CredentialEditor

pn.extension('floatpanel')
pn.extension(notifications=True)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

template = pn.template.ReactTemplate(
    title='Admin Dashboard',
    collapsed_sidebar=True,
    cols={'lg': 12, 'md': 8, 'sm': 3, 'xs': 3, 'xxs': 3},
    save_layout=False,
)
template.main[0:1, 0:12] = header.Component()

# one snapshot per session, the editor owns every change after this
try:
    credentials = db.get_credentials()
    slots = db.get_slots()
except Exception as e:
    logger.exception('loading credentials failed')
    template.main[1:3, 0:12] = pn.pane.HTML(
        f'<h1>Cannot load credentials</h1><p>{html.escape(str(e))}</p>')
else:
    editor = CredentialEditor(credentials, slots, write=api.update_data)
    template.main[1:14, 0:12] = credentialsPanel.Component(editor=editor)

template.servable()
