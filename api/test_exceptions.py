"""
Tests for API error formatting.
"""
from django.test import SimpleTestCase
from rest_framework.exceptions import NotFound
from api.exceptions import custom_exception_handler, flatten_error_details


class FlattenErrorDetailsTest(SimpleTestCase):
    """Test conversion of DRF error details into a flat list."""

    def test_field_errors(self):
        details = {
            'email': [{'message': 'Enter a valid email address.', 'code': 'invalid'}],
        }

        self.assertEqual(flatten_error_details(details), [
            {'field': 'email', 'message': 'Enter a valid email address.', 'code': 'invalid'},
        ])

    def test_list_child_errors_use_index_path(self):
        details = {
            'painPoints': {1: [{'message': 'Not a valid string.', 'code': 'invalid'}]},
        }

        errors = flatten_error_details(details)

        self.assertEqual(errors[0]['field'], 'painPoints.1')

    def test_non_field_errors_have_no_field(self):
        details = {
            'non_field_errors': [{'message': 'Invalid data.', 'code': 'invalid'}],
        }

        self.assertIsNone(flatten_error_details(details)[0]['field'])

    def test_multiple_fields_are_all_reported(self):
        details = {
            'email': [{'message': 'This field is required.', 'code': 'required'}],
            'feedback': [{'message': 'Not a valid string.', 'code': 'invalid'}],
        }

        fields = [error['field'] for error in flatten_error_details(details)]

        self.assertEqual(fields, ['email', 'feedback'])


class CustomExceptionHandlerTest(SimpleTestCase):
    """Test the envelope produced for non-validation errors."""

    def test_api_exception_uses_detail_as_message(self):
        with self.assertLogs('api', level='WARNING'):
            response = custom_exception_handler(NotFound('Nothing here'), {})

        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.data, {'success': False, 'message': 'Nothing here'})

    def test_unexpected_exception_becomes_500(self):
        with self.assertLogs('api', level='ERROR'):
            response = custom_exception_handler(RuntimeError('boom'), {})

        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.data, {'success': False, 'message': 'Internal Server Error'})
