"""
Tests for the credential cards, the panel and the header
"""

import datetime

import pytest

import adminDashboard.styling as styling
from adminDashboard.components import credentialCard, credentialsPanel, header
from adminDashboard.editor import Editing, Viewing


@pytest.fixture
def panel(editor):
    return credentialsPanel.Component(editor=editor)


class TestCredentialCard:
    """Test the read and edit views of one card"""

    def test_read_view_shows_values(self, editor):
        card = credentialCard.Component(editor=editor, cred_key="cred1")

        assert card._body.objects[0] is card.read_view
        assert "one@example.com" in card.details.object
        assert "pw-one" in card.details.object
        assert "May 01, 2024" in card.details.object
        assert "Unlocked" in card.badges.object
        assert "slot1" in card.badges.object
        assert "Lock" in card.lock_btn.name
        assert card._layout.styles == styling.unlocked_border

    def test_invalid_date_shown_raw(self, editor):
        """Test that an impossible expiry date is displayed as stored"""
        card = credentialCard.Component(editor=editor, cred_key="cred2")

        assert "2024-13-45" in card.details.object
        assert "Locked" in card.badges.object
        assert "Unlock" in card.lock_btn.name
        assert card._layout.styles == styling.locked_border

    def test_edit_button_opens_edit_view(self, editor):
        card = credentialCard.Component(editor=editor, cred_key="cred3")
        card.handle_edit(None)

        assert editor.mode == Editing("cred3")
        assert card._body.objects[0] is card.edit_view
        assert card.email_input.value == "three@example.com"
        assert card.password_input.value == "pw-three"
        assert card.max_usage_input.value == 2
        assert card.usage_count_input.value == 7
        assert card.expiry_picker.value == datetime.date(2025, 1, 31)

    def test_unknown_slot_kept_in_options(self, editor):
        """Test that a slot missing from the mapping stays selected"""
        card = credentialCard.Component(editor=editor, cred_key="cred4")
        card.handle_edit(None)

        assert "slot9" in card.slot_select.options
        assert card.slot_select.value == "slot9"

    def test_typing_updates_working_copy(self, editor):
        card = credentialCard.Component(editor=editor, cred_key="cred1")
        card.handle_edit(None)

        card.email_input.value = "typed@example.com"
        card.max_usage_input.value = 11
        card.slot_select.value = "slot2"

        cred = editor.credential("cred1")
        assert cred.email == "typed@example.com"
        assert cred.max_usage == 11
        assert cred.belongs_to_slot == "slot2"

    def test_date_picker_sets_expiry(self, editor):
        card = credentialCard.Component(editor=editor, cred_key="cred1")
        card.handle_edit(None)

        card.expiry_picker.value = datetime.date(2027, 12, 24)

        assert editor.credential("cred1").expiry_date == "2027-12-24"
        assert card.expiry_input.value == "2027-12-24"

    def test_cleared_number_shows_kept_value(self, editor):
        """Test that a rejected number puts the saved value back in the input"""
        card = credentialCard.Component(editor=editor, cred_key="cred1")
        card.handle_edit(None)

        card.max_usage_input.value = None

        assert editor.credential("cred1").max_usage == 10
        assert card.max_usage_input.value == 10

    def test_cleared_date_picker_shows_stored_date(self, editor):
        card = credentialCard.Component(editor=editor, cred_key="cred1")
        card.handle_edit(None)

        card.expiry_picker.value = None

        assert editor.credential("cred1").expiry_date == "2024-05-01"
        assert card.expiry_picker.value == datetime.date(2024, 5, 1)

    def test_typing_ignored_when_viewing(self, editor):
        card = credentialCard.Component(editor=editor, cred_key="cred1")

        card.email_input.value = "ignored@example.com"

        assert editor.credential("cred1").email == "one@example.com"

    def test_save_returns_to_read_view(self, editor, writer):
        card = credentialCard.Component(editor=editor, cred_key="cred1")
        card.handle_edit(None)
        card.password_input.value = "new-pw"

        card.handle_save(None)

        assert writer.calls[0][0] == "/cred1"
        assert writer.calls[0][1]["password"] == "new-pw"
        assert editor.mode == Viewing()
        assert card._body.objects[0] is card.read_view
        assert "new-pw" in card.details.object

    def test_failed_save_stays_in_edit_view(self, failing_editor):
        card = credentialCard.Component(editor=failing_editor, cred_key="cred1")
        card.handle_edit(None)
        card.handle_save(None)

        assert card._body.objects[0] is card.edit_view

    def test_cancel_returns_to_read_view(self, editor):
        card = credentialCard.Component(editor=editor, cred_key="cred1")
        card.handle_edit(None)
        card.email_input.value = "draft@example.com"

        card.handle_cancel(None)

        assert card._body.objects[0] is card.read_view
        assert "one@example.com" in card.details.object


class TestCredentialsPanel:
    """Test the card grid and the confirmation dialog"""

    def test_one_card_per_credential(self, panel):
        assert list(panel.cards) == ["cred1", "cred2", "cred3", "cred4"]

    def test_only_one_card_in_edit_view(self, panel):
        panel.cards["cred1"].handle_edit(None)
        panel.cards["cred2"].handle_edit(None)

        assert panel.cards["cred1"]._body.objects[0] is panel.cards["cred1"].read_view
        assert panel.cards["cred2"]._body.objects[0] is panel.cards["cred2"].edit_view

    def test_lock_button_opens_dialog(self, panel):
        panel.cards["cred1"].handle_lock(None)

        assert panel.dialog is not None
        assert panel.dialog.name == "Lock cred1"
        assert "Are you sure you want to lock cred1?" in panel.dialog_description.object
        assert panel.floating_windows.objects[0] is panel.dialog

    def test_confirm_writes_and_closes(self, panel, editor, writer):
        panel.cards["cred1"].handle_lock(None)
        panel.handle_confirm(None)

        assert writer.calls == [("/cred1/locked", 1)]
        assert panel.dialog is None
        assert len(panel.floating_windows.objects) == 0
        assert "Locked" in panel.cards["cred1"].badges.object

    def test_cancel_closes_without_write(self, panel, editor, writer):
        panel.cards["cred2"].handle_lock(None)
        panel.handle_dismiss(None)

        assert writer.calls == []
        assert editor.confirmation is None
        assert len(panel.floating_windows.objects) == 0

    def test_closing_window_dismisses(self, panel, editor, writer):
        panel.cards["cred2"].handle_lock(None)
        panel.dialog.status = "closed"

        assert editor.confirmation is None
        assert writer.calls == []

    def test_renders(self, panel):
        layout = panel.__panel__()

        assert "Credentials Management" in layout.objects[0].object


class TestHeader:
    """Test the scroll aware header"""

    def test_starts_transparent(self):
        component = header.Component()

        assert not component.scrolled
        assert component._layout.styles == styling.header_transparent

    def test_scroll_past_threshold_frosts(self):
        component = header.Component()
        component.observer.scroll_y = 11

        assert component.scrolled
        assert component._layout.styles == styling.header_frosted

    def test_scroll_at_threshold_stays_transparent(self):
        component = header.Component()
        component.observer.scroll_y = 10

        assert not component.scrolled

    def test_scroll_back_to_top(self):
        component = header.Component()
        component.observer.scroll_y = 300
        component.observer.scroll_y = 0

        assert not component.scrolled
        assert component._layout.styles == styling.header_transparent

    def test_title(self):
        component = header.Component()

        assert "Admin Dashboard" in component.brand.object
