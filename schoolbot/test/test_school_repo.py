from unittest.mock import patch

from django.db import OperationalError
from django.test import TestCase

from schoolbot.ai_engine.resolution.infrastructure.school_repo import SchoolDataRepository
from schoolbot.models import Club, News, Program, SchoolFact
from schoolbot.services.errors import StorageError


class SchoolDataRepositoryTests(TestCase):
    def setUp(self):
        self.repo = SchoolDataRepository()
        SchoolFact.objects.create(key="alamat", value="Jl. Pelita 1")
        SchoolFact.objects.create(key="telp", value="(0285) 410447")
        Program.objects.create(code="TKJ", name="Teknik Komputer dan Jaringan", description="Jaringan.")
        Program.objects.create(code="RPL", name="Rekayasa Perangkat Lunak", description="Aplikasi.")
        Club.objects.create(name="Pramuka", supervisor="Pak Ahmad")
        for i in range(7):
            News.objects.create(title=f"Berita {i}", link=f"https://contoh.sch.id/berita/{i}")

    def test_get_facts_all_and_filtered(self):
        self.assertEqual(self.repo.get_facts(), {"alamat": "Jl. Pelita 1", "telp": "(0285) 410447"})
        self.assertEqual(self.repo.get_facts(["telp", "email"]), {"telp": "(0285) 410447"})

    def test_program_by_code_is_case_insensitive(self):
        row = self.repo.get_program_by_code("rpl")
        self.assertEqual(row["name"], "Rekayasa Perangkat Lunak")
        self.assertIsNone(self.repo.get_program_by_code("mm"))

    def test_list_programs_in_insertion_order(self):
        names = [r["name"] for r in self.repo.list_programs()]
        self.assertEqual(names, ["Teknik Komputer dan Jaringan", "Rekayasa Perangkat Lunak"])
        self.assertEqual(len(self.repo.list_programs(limit=1)), 1)

    def test_list_clubs(self):
        self.assertEqual(
            self.repo.list_clubs(),
            [{"name": "Pramuka", "supervisor": "Pak Ahmad", "description": ""}],
        )

    def test_latest_news_newest_first(self):
        rows = self.repo.latest_news(5)
        self.assertEqual(len(rows), 5)
        self.assertEqual(rows[0]["title"], "Berita 6")
        self.assertEqual(set(rows[0]), {"title", "link", "date"})

    def test_health_check_counts(self):
        self.assertEqual(self.repo.health_check(), {"status": "ok", "facts": 2, "programs": 2})

    def test_database_error_wrapped(self):
        with patch.object(Program.objects, "order_by", side_effect=OperationalError("database is locked")):
            with self.assertRaises(StorageError) as ctx:
                self.repo.list_programs()
        self.assertIn("list_programs", str(ctx.exception))
        self.assertIsInstance(ctx.exception.__cause__, OperationalError)
