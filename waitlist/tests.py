from io import StringIO
from django.core.management import call_command
from django.db import IntegrityError
from django.test import TestCase
from waitlist.factories import WaitlistEntryFactory, WaitlistEntryWithFeedbackFactory
from waitlist.models import WaitlistEntry
from waitlist.services import normalize_email, upsert_waitlist_entry


class UpsertWaitlistEntryTestCase(TestCase):
    """Test the merge-upsert keyed by email"""

    def test_new_email_without_feedback_creates_empty_entry(self):
        entry, created = upsert_waitlist_entry('new@example.com')

        self.assertTrue(created)
        self.assertEqual(entry.email, 'new@example.com')
        self.assertEqual(entry.feedback, '')
        self.assertEqual(entry.pain_points, [])
        self.assertEqual(WaitlistEntry.objects.count(), 1)

    def test_new_email_stores_supplied_values(self):
        entry, created = upsert_waitlist_entry(
            'new@example.com',
            feedback='Need quizzes',
            pain_points=['setup time', 'payments'],
        )

        self.assertTrue(created)
        entry.refresh_from_db()
        self.assertEqual(entry.feedback, 'Need quizzes')
        self.assertEqual(entry.pain_points, ['setup time', 'payments'])

    def test_feedback_update_leaves_pain_points_untouched(self):
        upsert_waitlist_entry('creator@example.com', pain_points=['setup time'])

        entry, created = upsert_waitlist_entry('creator@example.com', feedback='great idea')

        self.assertFalse(created)
        entry.refresh_from_db()
        self.assertEqual(entry.feedback, 'great idea')
        self.assertEqual(entry.pain_points, ['setup time'])

    def test_blank_feedback_does_not_erase_stored_feedback(self):
        upsert_waitlist_entry('creator@example.com', feedback='great idea')

        upsert_waitlist_entry('creator@example.com', feedback='')
        entry, _ = upsert_waitlist_entry('creator@example.com', feedback='   ')

        entry.refresh_from_db()
        self.assertEqual(entry.feedback, 'great idea')

    def test_empty_pain_points_do_not_erase_stored_pain_points(self):
        upsert_waitlist_entry('creator@example.com', pain_points=['setup time'])

        entry, _ = upsert_waitlist_entry('creator@example.com', pain_points=[])

        entry.refresh_from_db()
        self.assertEqual(entry.pain_points, ['setup time'])

    def test_non_empty_pain_points_replace_previous_list(self):
        upsert_waitlist_entry('creator@example.com', pain_points=['setup time'])

        entry, _ = upsert_waitlist_entry(
            'creator@example.com',
            pain_points=['payments', 'enrollment'],
        )

        entry.refresh_from_db()
        self.assertEqual(entry.pain_points, ['payments', 'enrollment'])

    def test_resubmission_keeps_single_row(self):
        upsert_waitlist_entry('creator@example.com')
        upsert_waitlist_entry('creator@example.com', feedback='more')
        upsert_waitlist_entry('creator@example.com')

        self.assertEqual(WaitlistEntry.objects.filter(email='creator@example.com').count(), 1)

    def test_email_domain_and_whitespace_are_normalized(self):
        first, _ = upsert_waitlist_entry('Creator@Example.com')
        second, created = upsert_waitlist_entry('  Creator@example.COM ')

        self.assertFalse(created)
        self.assertEqual(first.pk, second.pk)
        self.assertEqual(second.email, 'Creator@example.com')

    def test_local_part_case_is_kept(self):
        upsert_waitlist_entry('Creator@example.com')
        _, created = upsert_waitlist_entry('creator@example.com')

        self.assertTrue(created)
        self.assertEqual(WaitlistEntry.objects.count(), 2)

    def test_resubmission_without_changes_keeps_updated_at(self):
        entry, _ = upsert_waitlist_entry('creator@example.com', feedback='great idea')
        original_updated_at = entry.updated_at

        entry, _ = upsert_waitlist_entry('creator@example.com')

        entry.refresh_from_db()
        self.assertEqual(entry.updated_at, original_updated_at)

    def test_normalize_email(self):
        self.assertEqual(normalize_email('  Ann@Example.COM\n'), 'Ann@example.com')


class WaitlistEntryModelTestCase(TestCase):
    """Test WaitlistEntry model behaviour"""

    def test_email_is_unique(self):
        WaitlistEntryFactory(email='dup@example.com')

        with self.assertRaises(IntegrityError):
            WaitlistEntry.objects.create(email='dup@example.com')

    def test_str_and_has_feedback(self):
        entry = WaitlistEntryFactory(email='plain@example.com')
        self.assertEqual(str(entry), 'plain@example.com')
        self.assertFalse(entry.has_feedback)

        entry_with_feedback = WaitlistEntryWithFeedbackFactory()
        self.assertTrue(entry_with_feedback.has_feedback)

    def test_uuid_is_assigned(self):
        first = WaitlistEntryFactory()
        second = WaitlistEntryFactory()
        self.assertIsNotNone(first.uuid)
        self.assertNotEqual(first.uuid, second.uuid)


class ExportWaitlistCommandTestCase(TestCase):
    """Test the export_waitlist management command"""

    def setUp(self):
        self.quiet = WaitlistEntryFactory(email='quiet@example.com')
        self.chatty = WaitlistEntryFactory(
            email='chatty@example.com',
            feedback='Please add certificates',
            pain_points=['setup time', 'payments'],
        )

    def _export(self, *args):
        out = StringIO()
        call_command('export_waitlist', *args, stdout=out, stderr=StringIO())
        return out.getvalue().splitlines()

    def test_exports_header_and_all_entries(self):
        lines = self._export()

        self.assertEqual(lines[0], 'email,feedback,pain_points,created_at,updated_at')
        self.assertEqual(len(lines), 3)
        self.assertTrue(lines[1].startswith('quiet@example.com,'))
        self.assertIn('setup time | payments', lines[2])

    def test_with_feedback_skips_bare_signups(self):
        lines = self._export('--with-feedback')

        self.assertEqual(len(lines), 2)
        self.assertTrue(lines[1].startswith('chatty@example.com,'))
