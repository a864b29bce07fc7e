import os
from unittest.mock import patch

from django.test import SimpleTestCase

from schoolbot.ai_engine.resolution.config.settings import (
    DEFAULT_SCHOOL_NAME,
    ResolutionSettings,
    get_resolution_settings,
)


class ResolutionSettingsTests(SimpleTestCase):
    @patch.dict(os.environ, {}, clear=True)
    def test_defaults(self):
        self.assertEqual(get_resolution_settings(), ResolutionSettings())
        self.assertEqual(get_resolution_settings().school_name, DEFAULT_SCHOOL_NAME)
        self.assertEqual(get_resolution_settings().cache_ttl_s, 300)

    @patch.dict(
        os.environ,
        {
            "SCHOOLBOT_SCHOOL_NAME": "SMK Contoh",
            "SCHOOLBOT_PPDB_URL": "https://ppdb.contoh.sch.id/",
            "SCHOOLBOT_CACHE_TTL_S": "60",
            "SCHOOLBOT_SWEEP_PROBABILITY": "5",
            "SCHOOLBOT_CACHE_AI_ANSWERS": "false",
            "SCHOOLBOT_CONTEXT_MAX_CHARS": "abc",
        },
        clear=True,
    )
    def test_env_overrides_and_clamping(self):
        cfg = get_resolution_settings()
        self.assertEqual(cfg.school_name, "SMK Contoh")
        self.assertEqual(cfg.ppdb_url, "https://ppdb.contoh.sch.id/")
        self.assertEqual(cfg.bkk_url, "https://bkk.ponpes-smksa.sch.id/")
        self.assertEqual(cfg.cache_ttl_s, 60)
        self.assertEqual(cfg.sweep_probability, 1.0)
        self.assertFalse(cfg.cache_ai_answers)
        self.assertEqual(cfg.context_max_chars, 4000)
