import html

import panel as pn
from panel.viewable import Viewer

import adminDashboard.styling as styling
from adminDashboard.notification import notify
from adminDashboard.utils import format_date, parse_date


class Component(Viewer):
    '''
    card of one credential, switches between a read view and an edit view
    '''

    def __init__(self, editor, cred_key, **params):
        self.editor = editor
        self.cred_key = cred_key
        self._syncing = False

        # read view
        self.badges = pn.pane.HTML(sizing_mode='stretch_width')
        self.details = pn.pane.HTML(sizing_mode='stretch_width')
        self.lock_btn = pn.widgets.Button(name='Lock', button_type='danger')
        self.edit_btn = pn.widgets.Button(name='✏️ Edit', button_type='light')

        # edit view
        self.email_input = pn.widgets.TextInput(
            name='Email', sizing_mode='stretch_width')
        # plain text so the password can be read while editing
        self.password_input = pn.widgets.TextInput(
            name='Password', sizing_mode='stretch_width')
        self.slot_select = pn.widgets.Select(
            name='Slot', options=[], sizing_mode='stretch_width')
        self.expiry_input = pn.widgets.TextInput(
            name='Expiry Date', placeholder='YYYY-MM-DD', sizing_mode='stretch_width')
        self.expiry_picker = pn.widgets.DatePicker(name='📅', width=140)
        self.max_usage_input = pn.widgets.IntInput(
            name='Max Usage', step=1, sizing_mode='stretch_width')
        self.usage_count_input = pn.widgets.IntInput(
            name='Usage Count', step=1, sizing_mode='stretch_width')
        self.cancel_btn = pn.widgets.Button(name='Cancel', button_type='light')
        self.save_btn = pn.widgets.Button(name='💾 Save', button_type='primary')

        self.read_view = pn.Column(
            self.badges,
            self.details,
            pn.Row(pn.layout.HSpacer(), self.lock_btn, self.edit_btn,
                   sizing_mode='stretch_width'),
            sizing_mode='stretch_width',
        )
        self.edit_view = pn.Column(
            self.email_input,
            self.password_input,
            self.slot_select,
            pn.Row(self.expiry_input, self.expiry_picker,
                   sizing_mode='stretch_width'),
            pn.Row(self.max_usage_input, self.usage_count_input,
                   sizing_mode='stretch_width'),
            pn.Row(pn.layout.HSpacer(), self.cancel_btn, self.save_btn,
                   sizing_mode='stretch_width'),
            sizing_mode='stretch_width',
        )
        self._body = pn.Column(sizing_mode='stretch_width')
        self._layout = pn.Card(
            self._body, title=cred_key, collapsible=False,
            sizing_mode='stretch_width')

        # register event handler
        self.lock_btn.on_click(self.handle_lock)
        self.edit_btn.on_click(self.handle_edit)
        self.cancel_btn.on_click(self.handle_cancel)
        self.save_btn.on_click(self.handle_save)
        for field, widget in self.field_widgets.items():
            widget.param.watch(
                lambda e, field=field: self.handle_field_change(field, e.new), 'value')
        self.expiry_picker.param.watch(self.handle_date_select, 'value')
        self.editor.param.watch(self.update, ['mode', 'working', 'slots'])

        super().__init__(**params)
        self.update()

    @property
    def field_widgets(self):
        return {
            'email': self.email_input,
            'password': self.password_input,
            'belongs_to_slot': self.slot_select,
            'expiry_date': self.expiry_input,
            'max_usage': self.max_usage_input,
            'usage_count': self.usage_count_input,
        }

    @property
    def is_editing(self):
        return self.editor.is_editing(self.cred_key)

    def create_badges(self, cred):
        lock_style = styling.locked_badge if cred.is_locked else styling.unlocked_badge
        return f"""
<div style="display: flex; justify-content: space-between;">
    <span style="{styling.css(lock_style)}">{'Locked' if cred.is_locked else 'Unlocked'}</span>
    <span style="{styling.css(styling.slot_badge)}">{html.escape(str(cred.belongs_to_slot))}</span>
</div>
"""

    def create_details(self, cred):
        '''
        create a html summary of the credential
        '''
        box = styling.css(styling.field_box)
        return f"""
<div style="{box}">
    <p style="margin: 0; font-size: 0.8em; color: grey;">Email</p>
    <p style="margin: 0; word-break: break-all;"><b>{html.escape(str(cred.email))}</b></p>
</div>
<div style="{box}">
    <p style="margin: 0; font-size: 0.8em; color: grey;">Password</p>
    <p style="margin: 0; word-break: break-all;"><b>{html.escape(str(cred.password))}</b></p>
</div>
<div style="display: flex; gap: 8px; text-align: center;">
    <div style="{box} flex: 1;">
        <p style="margin: 0; font-size: 0.8em; color: grey;">Expiry</p>
        <p style="margin: 0;"><b>{html.escape(str(format_date(cred.expiry_date)))}</b></p>
    </div>
    <div style="{box} flex: 1;">
        <p style="margin: 0; font-size: 0.8em; color: grey;">Max Usage</p>
        <p style="margin: 0;"><b>{cred.max_usage}</b></p>
    </div>
    <div style="{box} flex: 1;">
        <p style="margin: 0; font-size: 0.8em; color: grey;">Usage Count</p>
        <p style="margin: 0;"><b>{cred.usage_count}</b></p>
    </div>
</div>
"""

    def _sync_inputs(self, cred):
        '''copy the working copy into the edit widgets'''
        self._syncing = True
        try:
            options = list(self.editor.slots)
            # keep a slot the mapping does not know about selectable
            if cred.belongs_to_slot and cred.belongs_to_slot not in options:
                options.append(cred.belongs_to_slot)
            self.slot_select.options = options
            self.email_input.value = cred.email
            self.password_input.value = cred.password
            self.slot_select.value = cred.belongs_to_slot if cred.belongs_to_slot in options else None
            self.expiry_input.value = cred.expiry_date
            self.expiry_picker.value = parse_date(cred.expiry_date)
            self.max_usage_input.value = cred.max_usage
            self.usage_count_input.value = cred.usage_count
        finally:
            self._syncing = False

    def update(self, *events):
        cred = self.editor.credential(self.cred_key)
        self._layout.styles = styling.locked_border if cred.is_locked else styling.unlocked_border
        if self.is_editing:
            self._sync_inputs(cred)
            view = self.edit_view
        else:
            self.badges.object = self.create_badges(cred)
            self.details.object = self.create_details(cred)
            self.lock_btn.name = '🔓 Unlock' if cred.is_locked else '🔒 Lock'
            self.lock_btn.button_type = 'light' if cred.is_locked else 'danger'
            view = self.read_view
        if not (len(self._body.objects) == 1 and self._body.objects[0] is view):
            self._body.objects = [view]

    @notify
    def handle_field_change(self, field, value):
        if self._syncing or not self.is_editing:
            return None
        notifications = self.editor.set_field(self.cred_key, field, value)
        if notifications:
            # rejected, show the value that will be saved
            self._sync_inputs(self.editor.credential(self.cred_key))
        return notifications

    @notify
    def handle_date_select(self, e):
        if self._syncing or not self.is_editing:
            return None
        notifications = self.editor.select_expiry_date(self.cred_key, e.new)
        if e.new is None or notifications:
            self._sync_inputs(self.editor.credential(self.cred_key))
        return notifications

    def handle_edit(self, _):
        self.editor.begin_edit(self.cred_key)

    def handle_cancel(self, _):
        self.editor.cancel_edit()

    @notify
    def handle_save(self, _):
        yield from self.editor.save(self.cred_key)

    def handle_lock(self, _):
        self.editor.request_lock_toggle(self.cred_key)

    def __panel__(self):
        return self._layout
