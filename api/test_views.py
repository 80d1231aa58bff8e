"""
Tests for the waitlist API endpoint.
"""
from unittest.mock import patch
from django.core.cache import cache
from django.db import DatabaseError
from django.test import TestCase
from rest_framework.test import APIClient
from api.throttling import WaitlistRateThrottle
from waitlist.factories import WaitlistEntryFactory
from waitlist.models import WaitlistEntry

WAITLIST_URL = '/api/waitlist'


class WaitlistViewTest(TestCase):
    """Test POST /api/waitlist"""

    def setUp(self):
        cache.clear()
        self.client = APIClient()

    def post(self, payload):
        return self.client.post(WAITLIST_URL, payload, format='json')

    def test_new_email_without_feedback(self):
        """A bare email creates an entry with empty feedback and pain points."""
        response = self.post({'email': 'new@example.com'})

        self.assertEqual(response.status_code, 201)
        self.assertTrue(response.data['success'])
        entry = response.data['entry']
        self.assertEqual(entry['email'], 'new@example.com')
        self.assertEqual(entry['feedback'], '')
        self.assertEqual(entry['painPoints'], [])
        self.assertIn('id', entry)
        self.assertIn('createdAt', entry)
        self.assertIn('updatedAt', entry)

        stored = WaitlistEntry.objects.get(email='new@example.com')
        self.assertEqual(str(stored.uuid), entry['id'])

    def test_feedback_update_keeps_pain_points(self):
        """Resubmitting with feedback updates feedback only."""
        self.post({'email': 'creator@example.com', 'painPoints': ['setup time']})

        response = self.post({'email': 'creator@example.com', 'feedback': 'great idea'})

        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.data['entry']['feedback'], 'great idea')
        self.assertEqual(response.data['entry']['painPoints'], ['setup time'])

    def test_blank_feedback_leaves_stored_feedback(self):
        """Blank feedback never erases earlier feedback."""
        self.post({'email': 'creator@example.com', 'feedback': 'great idea'})

        response = self.post({'email': 'creator@example.com', 'feedback': '   '})

        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.data['entry']['feedback'], 'great idea')
        stored = WaitlistEntry.objects.get(email='creator@example.com')
        self.assertEqual(stored.feedback, 'great idea')

    def test_empty_pain_points_leave_stored_pain_points(self):
        """An empty pain point list never erases the stored list."""
        self.post({'email': 'creator@example.com', 'painPoints': ['setup time']})

        response = self.post({'email': 'creator@example.com', 'painPoints': []})

        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.data['entry']['painPoints'], ['setup time'])

    def test_pain_point_order_is_preserved(self):
        pain_points = ['payments', 'setup time', 'enrollment']

        response = self.post({'email': 'creator@example.com', 'painPoints': pain_points})

        self.assertEqual(response.data['entry']['painPoints'], pain_points)

    def test_invalid_email_is_rejected(self):
        """An invalid email yields 400 and touches nothing."""
        response = self.post({'email': 'not-an-email', 'feedback': 'hello'})

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data['success'], False)
        self.assertEqual(response.data['message'], 'Invalid input')
        self.assertEqual(response.data['errors'][0]['field'], 'email')
        self.assertEqual(response.data['errors'][0]['code'], 'invalid')
        self.assertFalse(WaitlistEntry.objects.exists())

    def test_invalid_email_does_not_modify_existing_entry(self):
        WaitlistEntryFactory(email='creator@example.com', feedback='original')

        response = self.post({'email': 'creator@', 'feedback': 'changed'})

        self.assertEqual(response.status_code, 400)
        self.assertEqual(WaitlistEntry.objects.get().feedback, 'original')

    def test_missing_email_is_rejected(self):
        response = self.post({'feedback': 'no email here'})

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data['errors'][0]['field'], 'email')
        self.assertEqual(response.data['errors'][0]['code'], 'required')

    def test_overlong_email_is_rejected(self):
        """Addresses longer than the 254 character column are client errors."""
        email = 'a' * 250 + '@example.com'

        response = self.post({'email': email})

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data['message'], 'Invalid input')
        self.assertEqual(response.data['errors'][0]['field'], 'email')
        self.assertEqual(response.data['errors'][0]['code'], 'max_length')
        self.assertFalse(WaitlistEntry.objects.exists())

    def test_feedback_is_stored_as_submitted(self):
        response = self.post({'email': 'creator@example.com', 'feedback': '  drip content  '})

        self.assertEqual(response.data['entry']['feedback'], '  drip content  ')
        self.assertEqual(WaitlistEntry.objects.get().feedback, '  drip content  ')

    def test_email_domain_is_normalized(self):
        self.post({'email': 'Creator@Example.COM'})

        response = self.post({'email': 'Creator@example.com', 'feedback': 'second'})

        self.assertEqual(response.data['entry']['email'], 'Creator@example.com')
        self.assertEqual(WaitlistEntry.objects.count(), 1)

    def test_non_string_pain_point_is_rejected(self):
        response = self.post({'email': 'creator@example.com', 'painPoints': ['ok', {'x': 1}]})

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data['errors'][0]['field'], 'painPoints.1')
        self.assertFalse(WaitlistEntry.objects.exists())

    def test_pain_points_must_be_a_list(self):
        response = self.post({'email': 'creator@example.com', 'painPoints': 'setup time'})

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data['errors'][0]['field'], 'painPoints')

    def test_malformed_json_is_rejected(self):
        response = self.client.post(
            WAITLIST_URL,
            data='{"email": ',
            content_type='application/json',
        )

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data['message'], 'Invalid input')
        self.assertIsNone(response.data['errors'][0]['field'])

    def test_non_object_body_is_rejected(self):
        response = self.client.post(WAITLIST_URL, ['a@example.com'], format='json')

        self.assertEqual(response.status_code, 400)
        self.assertIsNone(response.data['errors'][0]['field'])

    def test_trailing_slash_is_accepted(self):
        response = self.client.post(WAITLIST_URL + '/', {'email': 'slash@example.com'}, format='json')

        self.assertEqual(response.status_code, 201)

    def test_get_is_not_allowed(self):
        response = self.client.get(WAITLIST_URL)

        self.assertEqual(response.status_code, 405)
        self.assertEqual(response.data['success'], False)

    @patch('api.views.upsert_waitlist_entry')
    def test_persistence_failure_returns_opaque_500(self, mock_upsert):
        """Database errors are logged and reported without details."""
        mock_upsert.side_effect = DatabaseError('connection lost')

        with self.assertLogs('api', level='ERROR') as logs:
            response = self.post({'email': 'creator@example.com'})

        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.data, {'success': False, 'message': 'Internal Server Error'})
        self.assertIn('connection lost', logs.output[0])

    @patch.object(WaitlistRateThrottle, 'THROTTLE_RATES', {'waitlist': '2/minute'})
    def test_signups_are_throttled_per_client(self):
        self.post({'email': 'one@example.com'})
        self.post({'email': 'two@example.com'})

        response = self.post({'email': 'three@example.com'})

        self.assertEqual(response.status_code, 429)
        self.assertEqual(response.data['success'], False)
        self.assertIn('throttled', response.data['message'])
        self.assertFalse(WaitlistEntry.objects.filter(email='three@example.com').exists())


class SchemaViewTest(TestCase):
    """Test the OpenAPI schema endpoint"""

    def setUp(self):
        cache.clear()

    def test_schema_documents_waitlist_endpoint(self):
        response = self.client.get('/api/schema/', HTTP_ACCEPT='application/json')

        self.assertEqual(response.status_code, 200)
        self.assertIn('/api/waitlist', response.content.decode())

    @patch.object(WaitlistRateThrottle, 'THROTTLE_RATES', {'waitlist': '1/minute'})
    def test_schema_requests_do_not_use_signup_budget(self):
        for _ in range(3):
            response = self.client.get('/api/schema/', HTTP_ACCEPT='application/json')
            self.assertEqual(response.status_code, 200)

        response = APIClient().post(WAITLIST_URL, {'email': 'after-docs@example.com'}, format='json')

        self.assertEqual(response.status_code, 201)
