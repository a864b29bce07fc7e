from __future__ import annotations

from django.core.management.base import BaseCommand
from django.db import transaction

from schoolbot.models import Club, News, Program, SchoolFact

DEFAULT_FACTS = [
    ("visi", "Tersedianya generasi muda profesional, mandiri, dan berakhlaqul karimah."),
    ("misi", "Menyiapkan peserta didik agar siap kerja & berakhlak mulia."),
    ("alamat", "Jl. Pelita 1 No. 322 (Perum Buaran Indah) Kota Pekalongan Jawa Tengah"),
    ("telp", "(0285) 410447"),
    ("email", "smk_sa@ymail.com"),
    ("website", "https://ponpes-smksa.sch.id/"),
]

DEFAULT_PROGRAMS = [
    ("TKJ", "Teknik Komputer dan Jaringan", "Mempelajari jaringan komputer, server administration, cybersecurity, dan maintenance hardware."),
    ("RPL", "Rekayasa Perangkat Lunak", "Fokus pada pemrograman web dan mobile, database design, dan software development."),
    ("MM", "Multimedia", "Desain grafis, animasi, video editing, dan konten digital."),
]

DEFAULT_CLUBS = [
    ("Pramuka", "Pak Ahmad", "Melatih kepemimpinan & kemandirian."),
    ("Robotik", "Bu Siti", "Klub robotika & coding."),
    ("Seni Islami", "Bu Fatimah", "Pengembangan seni islami & tilawah."),
]

DEFAULT_NEWS = [
    ("PPDB 2024/2025 Dibuka", "https://ppdb.ponpes-smksa.sch.id", ""),
    ("Jurusan TKJ Meraih Sertifikasi", "https://ponpes-smksa.sch.id/berita/tkj-sertifikasi", ""),
    ("Workshop Programming", "https://ponpes-smksa.sch.id/berita/workshop", ""),
]


class Command(BaseCommand):
    help = "Isi data default sekolah (statis, jurusan, ekskul, berita) jika tabel masih kosong. Contoh: python manage.py seed_school_data"

    def add_arguments(self, parser):
        parser.add_argument(
            "--force",
            action="store_true",
            help="Timpa/isi ulang data default walaupun tabel sudah berisi",
        )

    @transaction.atomic
    def handle(self, *args, **options):
        force: bool = bool(options.get("force"))
        created = {"facts": 0, "programs": 0, "clubs": 0, "news": 0}

        if force or not SchoolFact.objects.exists():
            for key, value in DEFAULT_FACTS:
                SchoolFact.objects.update_or_create(key=key, defaults={"value": value})
                created["facts"] += 1

        if force or not Program.objects.exists():
            for code, name, description in DEFAULT_PROGRAMS:
                Program.objects.update_or_create(name=name, defaults={"code": code, "description": description})
                created["programs"] += 1

        if force or not Club.objects.exists():
            for name, supervisor, description in DEFAULT_CLUBS:
                Club.objects.update_or_create(name=name, defaults={"supervisor": supervisor, "description": description})
                created["clubs"] += 1

        if force or not News.objects.exists():
            for title, link, date in DEFAULT_NEWS:
                News.objects.update_or_create(link=link, defaults={"title": title, "date": date})
                created["news"] += 1

        summary = " ".join(f"{k}={v}" for k, v in created.items())
        if not any(created.values()):
            self.stdout.write(self.style.WARNING("Data sudah ada, tidak ada yang diubah (pakai --force untuk menimpa)."))
            return
        self.stdout.write(self.style.SUCCESS(f"Seed selesai: {summary}"))
