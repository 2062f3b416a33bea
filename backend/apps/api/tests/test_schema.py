import json

from rest_framework.test import APITestCase


class OpenApiSchemaTests(APITestCase):
    def test_schema_is_served_without_prebuilt_file(self):
        response = self.client.get("/schema/", {"format": "json"})
        self.assertEqual(response.status_code, 200)
        document = json.loads(response.content)
        self.assertIn("/api/v1/products", document["paths"])
        self.assertIn("/api/v1/category/{category_id}", document["paths"])

    def test_swagger_ui_is_served(self):
        response = self.client.get("/docs/swagger/")
        self.assertEqual(response.status_code, 200)
