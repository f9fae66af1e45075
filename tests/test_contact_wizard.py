"""
Tests for the multi-step contact wizard and the quick interest form.
"""

import pytest

from core.contact_wizard import ContactWizard, WizardStep, SUBMIT_SUCCESS, SUBMIT_FAILURE
from core.interest_form import InterestForm, INTEREST_SUCCESS, INTEREST_FAILURE
from models.notification import NotificationLevel
from services.portfolio_api import PortfolioAPIError
from utils.file_handlers import FILE_TOO_LARGE, FILE_TYPE_NOT_SUPPORTED

from tests.conftest import VALID_DRAFT

MIB = 1024 * 1024


def fill(wizard, **overrides):
    values = {**VALID_DRAFT, **overrides}
    for name, value in values.items():
        wizard.update_field(name, value)


def wizard_at_last_step(client, **overrides):
    wizard = ContactWizard(client)
    fill(wizard, **overrides)
    assert wizard.advance()
    assert wizard.advance()
    assert wizard.step == WizardStep.MESSAGE
    return wizard


# ---------------------------------------------------------------------------
# Navigation
# ---------------------------------------------------------------------------

class TestNavigation:
    def test_starts_empty_on_first_step(self, portfolio_client):
        wizard = ContactWizard(portfolio_client)
        assert wizard.step == WizardStep.IDENTITY
        assert wizard.draft == {"name": "", "email": "", "subject": "", "message": ""}
        assert wizard.attachment is None

    def test_advance_blocked_by_invalid_email(self, portfolio_client):
        wizard = ContactWizard(portfolio_client)
        wizard.update_field("name", "Raj")
        wizard.update_field("email", "not-an-email")

        assert wizard.advance() is False
        assert wizard.step == WizardStep.IDENTITY
        assert wizard.errors["email"] == "Please enter a valid email address"
        assert "name" not in wizard.errors

    def test_advance_only_checks_current_step_fields(self, portfolio_client):
        wizard = ContactWizard(portfolio_client)
        wizard.update_field("name", "Raj")
        wizard.update_field("email", "raj@gmail.com")

        # subject and message are still empty but do not belong to step 1
        assert wizard.advance() is True
        assert wizard.step == WizardStep.SUBJECT
        assert wizard.errors == {}

    def test_advance_from_subject_step_requires_subject(self, portfolio_client):
        wizard = ContactWizard(portfolio_client)
        fill(wizard, subject="Hey")
        wizard.advance()

        assert wizard.advance() is False
        assert wizard.step == WizardStep.SUBJECT
        assert wizard.errors["subject"] == "Subject must be at least 5 characters"

    def test_step_never_exceeds_three(self, portfolio_client):
        wizard = wizard_at_last_step(portfolio_client)
        assert wizard.advance() is False
        assert wizard.step == WizardStep.MESSAGE

    def test_retreat_from_first_step_is_noop(self, portfolio_client):
        wizard = ContactWizard(portfolio_client)
        wizard.retreat()
        assert wizard.step == WizardStep.IDENTITY

    def test_retreat_keeps_values(self, portfolio_client):
        wizard = wizard_at_last_step(portfolio_client)
        wizard.retreat()
        assert wizard.step == WizardStep.SUBJECT
        assert wizard.draft == VALID_DRAFT

    def test_update_field_validates_only_that_field(self, portfolio_client):
        wizard = ContactWizard(portfolio_client)
        wizard.update_field("name", "R2D2")
        assert wizard.errors == {"name": "Name can only contain letters and spaces"}

        wizard.update_field("name", "Raj")
        assert wizard.errors == {}

    def test_update_unknown_field_raises(self, portfolio_client):
        wizard = ContactWizard(portfolio_client)
        with pytest.raises(KeyError):
            wizard.update_field("phone", "123")


# ---------------------------------------------------------------------------
# Attachments
# ---------------------------------------------------------------------------

class TestAttachments:
    def test_six_mib_file_rejected(self, portfolio_client):
        wizard = ContactWizard(portfolio_client)
        accepted = wizard.attach_file("big.pdf", "application/pdf", b"x" * (6 * MIB))

        assert accepted is False
        assert wizard.attachment is None
        [note] = wizard.drain_notifications()
        assert note.level == NotificationLevel.ERROR
        assert note.message == FILE_TOO_LARGE

    def test_four_mib_pdf_accepted(self, portfolio_client):
        wizard = ContactWizard(portfolio_client)
        accepted = wizard.attach_file("resume.pdf", "application/pdf", b"x" * (4 * MIB))

        assert accepted is True
        assert wizard.attachment.filename == "resume.pdf"
        assert wizard.attachment.size_label == "4.0 MB"
        assert wizard.drain_notifications()[0].level == NotificationLevel.SUCCESS

    def test_exactly_five_mib_accepted(self, portfolio_client):
        wizard = ContactWizard(portfolio_client)
        assert wizard.attach_file("a.png", "image/png", b"x" * (5 * MIB)) is True

    def test_wrong_type_rejected(self, portfolio_client):
        wizard = ContactWizard(portfolio_client)
        accepted = wizard.attach_file("setup.exe", "application/x-msdownload", b"MZ")

        assert accepted is False
        assert wizard.attachment is None
        assert wizard.drain_notifications()[0].message == FILE_TYPE_NOT_SUPPORTED

    def test_rejected_file_keeps_previous_attachment_unset(self, portfolio_client):
        wizard = ContactWizard(portfolio_client)
        wizard.attach_file("notes.txt", "text/plain", b"hello")
        wizard.remove_attachment()
        wizard.attach_file("huge.txt", "text/plain", b"x" * (6 * MIB))
        assert wizard.attachment is None


# ---------------------------------------------------------------------------
# Submission
# ---------------------------------------------------------------------------

class TestSubmit:
    def test_submit_sends_exactly_the_draft(self, portfolio_client):
        wizard = wizard_at_last_step(portfolio_client)

        assert wizard.submit() is True
        portfolio_client.submit_contact.assert_called_once_with(VALID_DRAFT, None)

    def test_submit_includes_attachment(self, portfolio_client):
        wizard = wizard_at_last_step(portfolio_client)
        wizard.attach_file("cv.pdf", "application/pdf", b"%PDF-1.4")
        attachment = wizard.attachment

        wizard.submit()
        portfolio_client.submit_contact.assert_called_once_with(VALID_DRAFT, attachment)

    def test_success_resets_everything(self, portfolio_client):
        wizard = wizard_at_last_step(portfolio_client)
        wizard.attach_file("cv.pdf", "application/pdf", b"%PDF-1.4")
        wizard.drain_notifications()

        wizard.submit()

        assert wizard.step == WizardStep.IDENTITY
        assert wizard.draft == {"name": "", "email": "", "subject": "", "message": ""}
        assert wizard.attachment is None
        assert wizard.is_submitting is False
        assert [n.message for n in wizard.drain_notifications()] == [SUBMIT_SUCCESS]

    def test_failure_keeps_draft(self, portfolio_client):
        portfolio_client.submit_contact.side_effect = PortfolioAPIError("boom", status_code=500)
        wizard = wizard_at_last_step(portfolio_client)

        assert wizard.submit() is False
        assert wizard.step == WizardStep.MESSAGE
        assert wizard.draft == VALID_DRAFT
        assert wizard.is_submitting is False
        [note] = wizard.drain_notifications()
        assert note.level == NotificationLevel.ERROR
        assert note.message == SUBMIT_FAILURE

    def test_retry_after_failure(self, portfolio_client):
        portfolio_client.submit_contact.side_effect = [PortfolioAPIError("down"), None]
        wizard = wizard_at_last_step(portfolio_client)

        assert wizard.submit() is False
        assert wizard.submit() is True
        assert portfolio_client.submit_contact.call_count == 2

    def test_invalid_message_blocks_network_call(self, portfolio_client):
        wizard = wizard_at_last_step(portfolio_client, message="short")

        assert wizard.submit() is False
        portfolio_client.submit_contact.assert_not_called()
        assert wizard.errors["message"] == "Message must be at least 10 characters"

    def test_submit_outside_last_step_does_nothing(self, portfolio_client):
        wizard = ContactWizard(portfolio_client)
        fill(wizard)

        assert wizard.submit() is False
        portfolio_client.submit_contact.assert_not_called()

    def test_submit_is_not_reentrant(self, portfolio_client):
        wizard = wizard_at_last_step(portfolio_client)

        def reenter(contact, attachment):
            assert wizard.is_submitting is True
            assert wizard.submit() is False

        portfolio_client.submit_contact.side_effect = reenter
        assert wizard.submit() is True
        assert portfolio_client.submit_contact.call_count == 1

    def test_state_reports_can_submit(self, portfolio_client):
        wizard = wizard_at_last_step(portfolio_client)
        state = wizard.state()
        assert state["step"] == 3
        assert state["is_valid"] is True
        assert state["can_submit"] is True

    def test_manual_reset(self, portfolio_client):
        wizard = wizard_at_last_step(portfolio_client)
        wizard.reset()
        assert wizard.step == WizardStep.IDENTITY
        assert wizard.draft["name"] == ""


# ---------------------------------------------------------------------------
# Quick interest form
# ---------------------------------------------------------------------------

class TestInterestForm:
    def test_valid_email_posts_and_clears(self, portfolio_client):
        form = InterestForm(portfolio_client)

        assert form.submit("raj@gmail.com") is True
        portfolio_client.send_interest_email.assert_called_once_with("raj@gmail.com")
        assert form.email == ""
        assert form.drain_notifications()[0].message == INTEREST_SUCCESS

    def test_invalid_email_never_posts(self, portfolio_client):
        form = InterestForm(portfolio_client)

        assert form.submit("nope") is False
        assert form.error == "Please enter a valid email address"
        portfolio_client.send_interest_email.assert_not_called()

    def test_failure_keeps_value(self, portfolio_client):
        portfolio_client.send_interest_email.side_effect = PortfolioAPIError("timeout")
        form = InterestForm(portfolio_client)

        assert form.submit("raj@gmail.com") is False
        assert form.email == "raj@gmail.com"
        assert form.is_submitting is False
        assert form.drain_notifications()[0].message == INTEREST_FAILURE
