import json
from unittest.mock import patch

from django.contrib.auth import get_user_model
from django.test import TestCase

from schoolbot import service
from schoolbot.models import Program
from schoolbot.test.utils.fakes import FakeAIClient, make_bot


class AskApiTests(TestCase):
    def setUp(self):
        self.ai = FakeAIClient(text="Jawaban AI")
        service.set_school_bot(make_bot(ai=self.ai))
        self.addCleanup(service.set_school_bot, None)

    def _post(self, body, content_type="application/json"):
        return self.client.post("/api/ask", data=body, content_type=content_type)

    def test_ask_rule_answer(self):
        res = self._post(json.dumps({"question": "Halo"}))
        self.assertEqual(res.status_code, 200)
        data = res.json()
        self.assertIn("Halo!", data["answer"])
        self.assertEqual(data["quickReplies"], ["Jurusan", "PPDB", "Ekstrakurikuler", "Kontak sekolah"])
        self.assertTrue(res["X-Request-ID"])

    def test_ask_accepts_message_field(self):
        res = self._post(json.dumps({"message": "kontak sekolah"}))
        self.assertTrue(res.json()["answer"].startswith("KONTAK SEKOLAH"))

    def test_ask_fallback_to_ai(self):
        res = self._post(json.dumps({"question": "jelaskan teori relativitas"}))
        self.assertEqual(res.json()["answer"], "Jawaban AI")
        self.assertEqual(len(self.ai.calls), 1)

    def test_ask_empty_question(self):
        res = self._post(json.dumps({}))
        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.json()["answer"], "Masukkan pertanyaan yang ingin Anda tanyakan.")

    def test_ask_invalid_json(self):
        res = self._post("{bukan json")
        self.assertEqual(res.status_code, 400)
        self.assertEqual(res.json()["status"], "error")

    def test_ask_non_object_json(self):
        self.assertEqual(self._post(json.dumps(["halo"])).status_code, 400)

    def test_ask_rejects_get(self):
        self.assertEqual(self.client.get("/api/ask").status_code, 405)


class ApiSurfaceTests(TestCase):
    def setUp(self):
        service.set_school_bot(make_bot())
        self.addCleanup(service.set_school_bot, None)
        self.staff = get_user_model().objects.create_user("admin", password="pw", is_staff=True)
        self.user = get_user_model().objects.create_user("siswa", password="pw")

    def test_index_lists_endpoints(self):
        data = self.client.get("/").json()
        self.assertEqual(data["endpoints"]["chat"], "/api/ask")

    def test_health_reports_database(self):
        Program.objects.create(code="RPL", name="Rekayasa Perangkat Lunak")
        data = self.client.get("/api/health").json()
        self.assertEqual(data["status"], "ok")
        self.assertEqual(data["database"]["programs"], 1)
        self.assertIn("timestamp", data)

    @patch("schoolbot.service.SchoolDataRepository.health_check")
    def test_health_reports_storage_error(self, health_mock):
        from schoolbot.services.errors import StorageError

        health_mock.side_effect = StorageError("health_check gagal: disk I/O error")
        data = self.client.get("/api/health").json()
        self.assertEqual(data["status"], "error")
        self.assertIn("disk I/O error", data["database"]["message"])

    def test_bot_stats_requires_staff(self):
        self.assertEqual(self.client.get("/api/admin/bot-stats").status_code, 403)
        self.client.force_login(self.user)
        self.assertEqual(self.client.get("/api/admin/bot-stats").status_code, 403)

    def test_bot_stats_and_clear_cache_for_staff(self):
        service.answer_question("halo")
        self.client.force_login(self.staff)

        stats = self.client.get("/api/admin/bot-stats").json()
        self.assertEqual(stats["cache"], {"size": 1, "keys": ["halo"]})

        res = self.client.post("/api/admin/clear-cache")
        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.json()["status"], "success")
        self.assertEqual(service.get_cache_stats()["size"], 0)

    def test_clear_cache_rules(self):
        self.assertEqual(self.client.post("/api/admin/clear-cache").status_code, 403)
        self.client.force_login(self.staff)
        self.assertEqual(self.client.get("/api/admin/clear-cache").status_code, 405)
