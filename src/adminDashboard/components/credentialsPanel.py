import panel as pn
from panel.viewable import Viewer

from adminDashboard.components import credentialCard
from adminDashboard.notification import notify


class Component(Viewer):
    '''
    grid of the four credential cards and the lock confirmation dialog
    '''

    def __init__(self, editor, **params):
        self.editor = editor
        self.cards = {key: credentialCard.Component(editor=editor, cred_key=key)
                      for key in editor.credential_keys}
        self.confirm_btn = pn.widgets.Button(name='Confirm', button_type='primary')
        self.dismiss_btn = pn.widgets.Button(name='Cancel', button_type='light')
        self.dialog_description = pn.pane.HTML(sizing_mode='stretch_width')
        self.dialog = None
        # floating window row
        self.floating_windows = pn.Row()

        self.confirm_btn.on_click(self.handle_confirm)
        self.dismiss_btn.on_click(self.handle_dismiss)
        self.editor.param.watch(self.update_dialog, 'confirmation')
        super().__init__(**params)

    def create_dialog(self, confirmation):
        self.dialog_description.object = f'<p>{confirmation.description}</p>'
        dialog = pn.layout.FloatPanel(
            self.dialog_description,
            pn.Row(pn.layout.HSpacer(), self.dismiss_btn, self.confirm_btn,
                   sizing_mode='stretch_width'),
            name=confirmation.title,
            contained=False,
            position='center',
            margin=20,
        )
        # closing the window is the same as cancel
        dialog.param.watch(self.handle_dialog_status, 'status')
        return dialog

    def update_dialog(self, *events):
        confirmation = self.editor.confirmation
        if confirmation is None:
            self.dialog = None
            self.floating_windows.clear()
            return
        self.dialog = self.create_dialog(confirmation)
        self.floating_windows.objects = [self.dialog]

    def handle_dialog_status(self, e):
        if e.new == 'closed' and self.editor.confirmation is not None:
            self.editor.dismiss()

    @notify
    def handle_confirm(self, _):
        yield from self.editor.confirm()

    def handle_dismiss(self, _):
        self.editor.dismiss()

    def __panel__(self):
        self._layout = pn.Column(
            pn.pane.HTML('<h2>Credentials Management</h2>'),
            pn.GridBox(*self.cards.values(), ncols=2, sizing_mode='stretch_width'),
            self.floating_windows,
            sizing_mode='stretch_width',
        )
        return self._layout
