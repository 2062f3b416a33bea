import unittest
from rest_framework import status
from apps.api.utils import error_response


class ErrorResponseTests(unittest.TestCase):
    def test_default_status_mapping_and_details(self):
        resp = error_response("NOT_FOUND", "Product not found with ID: 1", {"id": 1})
        self.assertEqual(resp.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(
            resp.data,
            {
                "error": {
                    "code": "NOT_FOUND",
                    "message": "Product not found with ID: 1",
                    "status": status.HTTP_404_NOT_FOUND,
                    "details": {"id": 1},
                }
            },
        )

    def test_invalid_argument_maps_to_400(self):
        resp = error_response("invalid_argument", "Invalid category ID.")
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(resp.data["error"]["code"], "INVALID_ARGUMENT")
        self.assertNotIn("details", resp.data["error"])

    def test_unknown_code_defaults_to_400(self):
        resp = error_response("UNKNOWN", "oops")
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)

    def test_custom_status_override(self):
        resp = error_response("UNKNOWN", "oops", http_status=status.HTTP_202_ACCEPTED)
        self.assertEqual(resp.status_code, status.HTTP_202_ACCEPTED)
        self.assertEqual(resp.data["error"]["message"], "oops")

    def test_list_details_are_kept(self):
        resp = error_response("VALIDATION_ERROR", "Validation failed", ["bad body"])
        self.assertEqual(resp.data["error"]["details"], ["bad body"])

    def test_blank_code_or_message_is_rejected(self):
        with self.assertRaises(ValueError):
            error_response("  ", "message")
        with self.assertRaises(ValueError):
            error_response("NOT_FOUND", "")
        with self.assertRaises(ValueError):
            error_response("NOT_FOUND", "x", http_status=42)
