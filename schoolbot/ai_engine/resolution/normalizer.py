from __future__ import annotations

import re
import unicodedata
from typing import List, Pattern, Tuple

_NON_WORD_RE = re.compile(r"[^\w\s]")
_SPACES_RE = re.compile(r"\s+")

# Urutan penting: substitusi berikutnya bekerja di atas hasil substitusi sebelumnya.
SYNONYMS: List[Tuple[Pattern[str], str]] = [
    (re.compile(r"rekayasa perangkat lunak|rpl"), "rpl"),
    (re.compile(r"teknik komputer dan jaringan|tkj"), "tkj"),
    (re.compile(r"multimedia|mm"), "mm"),
    (re.compile(r"ekstrakurikuler|ekskul|club|klub"), "ekskul"),
    (re.compile(r"pendaftaran|daftar sekolah|ppdb"), "ppdb"),
    (re.compile(r"alamat|lokasi|dimana|di mana"), "alamat"),
    (re.compile(r"kontak|telepon|telp|hubungi"), "kontak"),
    (re.compile(r"berita|kegiatan|agenda|event|acara"), "berita"),
]

_MAX_SYNONYM_PASSES = 8


def clean_text(text: str) -> str:
    t = unicodedata.normalize("NFKD", str(text or "")).lower()
    t = "".join(ch for ch in t if not unicodedata.combining(ch))
    t = _NON_WORD_RE.sub(" ", t)
    return _SPACES_RE.sub(" ", t).strip()


def apply_synonyms(text: str) -> str:
    out = text
    # Diulang sampai stabil supaya normalize(normalize(x)) == normalize(x).
    for _ in range(_MAX_SYNONYM_PASSES):
        before = out
        for pattern, canonical in SYNONYMS:
            out = pattern.sub(canonical, out)
        if out == before:
            break
    return out


def normalize(text: str) -> str:
    cleaned = clean_text(text)
    if not cleaned:
        return ""
    return apply_synonyms(cleaned)
