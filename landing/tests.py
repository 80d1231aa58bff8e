from unittest.mock import patch
from django.db import DatabaseError
from django.test import TestCase, override_settings
from django.urls import reverse
from landing.content import CREATOR_PAIN_POINTS, CORE_FEATURES, pain_point_choices
from landing.forms import WaitlistForm
from waitlist.factories import WaitlistEntryFactory
from waitlist.models import WaitlistEntry

# Templates use {% static %}; the manifest storage needs collectstatic first
TEST_STORAGES = {
    'default': {'BACKEND': 'django.core.files.storage.FileSystemStorage'},
    'staticfiles': {'BACKEND': 'django.contrib.staticfiles.storage.StaticFilesStorage'},
}


@override_settings(STORAGES=TEST_STORAGES)
class LandingPageTestCase(TestCase):
    """Test the landing page rendering"""

    def test_index_renders(self):
        response = self.client.get(reverse('landing:index'))

        self.assertEqual(response.status_code, 200)
        self.assertTemplateUsed(response, 'landing/index.html')
        self.assertContains(response, 'Launch Your Course Business')

    def test_index_shows_both_waitlist_forms(self):
        response = self.client.get(reverse('landing:index'))

        self.assertContains(response, 'data-waitlist-form="quick"')
        self.assertContains(response, 'data-waitlist-form="feedback"')
        self.assertContains(response, 'data-api-url="/api/waitlist"')

    def test_index_lists_pain_points_and_features(self):
        response = self.client.get(reverse('landing:index'))

        for point in CREATOR_PAIN_POINTS:
            self.assertContains(response, point['pain'])
            self.assertContains(response, point['solution'])
        for feature in CORE_FEATURES:
            self.assertContains(response, feature['title'])

    def test_index_includes_structured_data(self):
        response = self.client.get(reverse('landing:index'))

        self.assertContains(response, 'application/ld+json')
        self.assertContains(response, '"@type": "SoftwareApplication"')

    @override_settings(CONTACT_EMAIL='hello@lessonrush.com')
    def test_legal_pages_render(self):
        for name in ('landing:privacy_policy', 'landing:terms'):
            response = self.client.get(reverse(name))
            self.assertEqual(response.status_code, 200)
            self.assertContains(response, 'hello@lessonrush.com')

    def test_unknown_page_uses_custom_404(self):
        response = self.client.get('/does-not-exist/')

        self.assertEqual(response.status_code, 404)
        self.assertContains(response, 'Page not found', status_code=404)


@override_settings(STORAGES=TEST_STORAGES)
class JoinWaitlistFallbackTestCase(TestCase):
    """Test the form POST used when JavaScript is unavailable"""

    def setUp(self):
        self.url = reverse('landing:join_waitlist')
        self.pain = CREATOR_PAIN_POINTS[0]['pain']

    def test_valid_submission_creates_entry_and_redirects(self):
        response = self.client.post(self.url, {
            'email': 'Creator@Example.com',
            'feedback': 'Need certificates',
            'pain_points': [self.pain],
        })

        self.assertRedirects(response, reverse('landing:index') + '#feedback-section',
                             fetch_redirect_response=False)
        entry = WaitlistEntry.objects.get(email='Creator@example.com')
        self.assertEqual(entry.feedback, 'Need certificates')
        self.assertEqual(entry.pain_points, [self.pain])

    def test_feedback_submission_shows_thank_you(self):
        response = self.client.post(self.url, {
            'email': 'creator@example.com',
            'feedback': 'Need certificates',
        }, follow=True)

        messages = [str(m) for m in response.context['messages']]
        self.assertEqual(messages, ["Thank you for your feedback! We've added you to our waitlist."])

    def test_email_only_submission_shows_on_the_list(self):
        response = self.client.post(self.url, {'email': 'creator@example.com'}, follow=True)

        messages = [str(m) for m in response.context['messages']]
        self.assertEqual(messages, ["You're on the list! We'll notify you as soon as LessonRush is ready to launch."])

    def test_resubmission_merges_into_existing_entry(self):
        WaitlistEntryFactory(email='creator@example.com', feedback='first', pain_points=[self.pain])

        self.client.post(self.url, {'email': 'creator@example.com', 'feedback': ''})

        entry = WaitlistEntry.objects.get(email='creator@example.com')
        self.assertEqual(entry.feedback, 'first')
        self.assertEqual(entry.pain_points, [self.pain])

    def test_invalid_email_shows_error_and_creates_nothing(self):
        response = self.client.post(self.url, {'email': 'not-an-email'}, follow=True)

        self.assertContains(response, 'Please enter a valid email address')
        self.assertFalse(WaitlistEntry.objects.exists())

    def test_unknown_pain_point_is_rejected(self):
        form = WaitlistForm(data={'email': 'creator@example.com', 'pain_points': ['made up']})

        self.assertFalse(form.is_valid())
        self.assertIn('pain_points', form.errors)

    def test_unknown_pain_point_is_reported_to_the_visitor(self):
        response = self.client.post(self.url, {
            'email': 'creator@example.com',
            'pain_points': ['old copy'],
        }, follow=True)

        messages = [str(m) for m in response.context['messages']]
        self.assertEqual(messages, [
            '"old copy" is no longer one of the listed challenges. Please reselect and try again.',
        ])
        self.assertFalse(WaitlistEntry.objects.exists())

    def test_overlong_email_is_reported_to_the_visitor(self):
        response = self.client.post(self.url, {'email': 'a' * 250 + '@example.com'}, follow=True)

        messages = [str(m) for m in response.context['messages']]
        self.assertEqual(len(messages), 1)
        self.assertIn('at most 254 characters', messages[0])
        self.assertFalse(WaitlistEntry.objects.exists())

    @patch('landing.views.upsert_waitlist_entry')
    def test_database_failure_is_reported(self, mock_upsert):
        mock_upsert.side_effect = DatabaseError('locked')

        with self.assertLogs('landing', level='ERROR'):
            response = self.client.post(self.url, {'email': 'creator@example.com'}, follow=True)

        self.assertContains(response, 'Something went wrong')

    def test_get_is_not_allowed(self):
        response = self.client.get(self.url)

        self.assertEqual(response.status_code, 405)


@override_settings(SITE_DOMAIN='lessonrush.com')
class SeoTestCase(TestCase):
    """Test robots.txt, sitemap.xml and the Open Graph image"""

    def test_robots_points_to_sitemap(self):
        response = self.client.get('/robots.txt')

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response['Content-Type'], 'text/plain')
        self.assertContains(response, 'Sitemap: https://lessonrush.com/sitemap.xml')
        self.assertContains(response, 'Disallow: /api/')

    def test_sitemap_lists_pages_only(self):
        response = self.client.get('/sitemap.xml')
        content = response.content.decode()

        self.assertEqual(response.status_code, 200)
        self.assertIn('<loc>https://lessonrush.com/</loc>', content)
        self.assertIn('<loc>https://lessonrush.com/privacy-policy/</loc>', content)
        self.assertNotIn('og-image.png', content)
        self.assertNotIn('waitlist/join', content)

    def test_og_image_is_png(self):
        response = self.client.get('/og-image.png')

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response['Content-Type'], 'image/png')
        self.assertTrue(response.content.startswith(b'\x89PNG'))


class ContentTestCase(TestCase):
    def test_pain_point_choices_use_pain_text(self):
        choices = pain_point_choices()

        self.assertEqual(len(choices), len(CREATOR_PAIN_POINTS))
        self.assertEqual(choices[0], (CREATOR_PAIN_POINTS[0]['pain'],) * 2)
