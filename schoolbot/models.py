from django.db import models


class SchoolFact(models.Model):
    """
    Data statis sekolah berbentuk key/value (visi, misi, alamat, telp, email, website).
    Diisi oleh job scraper / seed, chatbot hanya membaca.
    """

    key = models.CharField(max_length=64, unique=True)
    value = models.TextField(blank=True, default="")
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["key"]

    def __str__(self):
        return f"{self.key}={self.value[:40]}"


class Program(models.Model):
    # Kode singkat jurusan (RPL, TKJ, MM) dipakai untuk lookup detail.
    code = models.CharField(max_length=16, blank=True, default="", db_index=True)
    name = models.CharField(max_length=255, unique=True)
    description = models.TextField(blank=True, default="")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["id"]

    def __str__(self):
        return f"{self.code or '-'} {self.name}"


class Club(models.Model):
    name = models.CharField(max_length=255, unique=True)
    supervisor = models.CharField(max_length=255, blank=True, default="")
    description = models.TextField(blank=True, default="")
    schedule = models.CharField(max_length=255, blank=True, default="")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["id"]

    def __str__(self):
        return self.name


class News(models.Model):
    title = models.CharField(max_length=500)
    link = models.URLField(max_length=500, unique=True)
    # Tanggal disimpan apa adanya dari halaman sumber (format bebas).
    date = models.CharField(max_length=64, blank=True, default="")
    excerpt = models.TextField(blank=True, default="")
    image_url = models.URLField(max_length=500, blank=True, default="")
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-id"]
        verbose_name_plural = "news"

    def __str__(self):
        return self.title[:60]


class AIConfiguration(models.Model):
    """
    Konfigurasi runtime AI fallback berbasis DB.
    Bisa CRUD via Django Admin, dan sistem memakai konfigurasi aktif terbaru
    (menimpa nilai dari .env).
    """

    name = models.CharField(max_length=100, default="Default")
    is_active = models.BooleanField(default=True)
    api_key = models.CharField(max_length=255, blank=True)
    model = models.CharField(max_length=255, default="gemini-2.0-flash")
    timeout = models.PositiveIntegerField(default=15)
    temperature = models.FloatField(default=0.2)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "AI configuration"

    def __str__(self):
        return f"{self.name} ({self.model})"
