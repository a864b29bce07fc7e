from django.test import SimpleTestCase

from schoolbot.ai_engine.resolution import build_school_bot
from schoolbot.ai_engine.resolution.config.settings import ResolutionSettings
from schoolbot.ai_engine.resolution.prompt import OFF_TOPIC_ANSWER, build_fallback_prompt
from schoolbot.test.utils.fakes import FakeSchoolRepo


def _prompt(**kwargs):
    params = dict(
        question="kapan PPDB dibuka?",
        context="SMK CONTOH\nVISI: Unggul",
        school_name="SMK Contoh",
        base_url="https://contoh.sch.id/",
        max_context_chars=4000,
    )
    params.update(kwargs)
    return build_fallback_prompt(**params)


class FallbackPromptTests(SimpleTestCase):
    def test_ppdb_and_bkk_instructions_default_urls(self):
        prompt = _prompt()
        self.assertIn("Jika pertanyaan tentang PPDB", prompt)
        self.assertIn("https://ppdb.ponpes-smksa.sch.id/", prompt)
        self.assertIn("Jika pertanyaan tentang BKK atau Bursa Kerja Khusus", prompt)
        self.assertIn("https://bkk.ponpes-smksa.sch.id/", prompt)

    def test_ppdb_and_bkk_urls_configurable(self):
        prompt = _prompt(ppdb_url="https://ppdb.contoh.sch.id/", bkk_url="https://bkk.contoh.sch.id/")
        self.assertIn("rangkum informasi terbaru dari https://ppdb.contoh.sch.id/", prompt)
        self.assertIn("rangkum informasi dari https://bkk.contoh.sch.id/", prompt)
        self.assertNotIn("ponpes-smksa", prompt)

    def test_school_context_and_question_embedded(self):
        prompt = _prompt()
        self.assertIn("website SMK Contoh", prompt)
        self.assertIn("KONTEKS SEKOLAH:\nSMK CONTOH\nVISI: Unggul", prompt)
        self.assertTrue(prompt.endswith("Pertanyaan: kapan PPDB dibuka?"))
        self.assertIn(OFF_TOPIC_ANSWER, prompt)

    def test_context_cut_to_limit(self):
        prompt = _prompt(context="§" * 100, max_context_chars=10)
        self.assertEqual(prompt.count("§"), 10)

    def test_factory_passes_urls_to_client(self):
        settings = ResolutionSettings(ppdb_url="https://ppdb.contoh.sch.id/", bkk_url="https://bkk.contoh.sch.id/")
        bot = build_school_bot(repo=FakeSchoolRepo(), settings=settings)
        self.assertEqual(bot.ai_client.ppdb_url, "https://ppdb.contoh.sch.id/")
        self.assertEqual(bot.ai_client.bkk_url, "https://bkk.contoh.sch.id/")
