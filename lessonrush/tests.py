from django.test import TestCase


class HealthCheckTestCase(TestCase):
    def test_health_check_reports_healthy(self):
        response = self.client.get('/health/')

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {
            'status': 'healthy',
            'service': 'lessonrush',
            'version': '0.1.0',
        })
