from django.core.management.base import BaseCommand

from schoolbot import service


class Command(BaseCommand):
    help = "Tanya chatbot dari terminal. Contoh: python manage.py ask_bot \"info jurusan\""

    def add_arguments(self, parser):
        parser.add_argument("question", nargs="+", help="Pertanyaan (boleh tanpa tanda kutip)")

    def handle(self, *args, **options):
        question = " ".join(options["question"])
        payload = service.answer_question(question, request_id="cli")

        self.stdout.write(payload["answer"])
        if payload.get("quickReplies"):
            self.stdout.write(self.style.SUCCESS("Quick replies: " + " | ".join(payload["quickReplies"])))
