import os
from datetime import timedelta
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

BASE_DIR = Path(__file__).resolve().parent.parent.parent

SECRET_KEY = os.getenv("SECRET_KEY", "change-me-in-production")
ALGORITHM = os.getenv("ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE = timedelta(minutes=int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", 60)))

DATABASE_URL = os.getenv("DATABASE_URL", f"sqlite:///{BASE_DIR}/expo_portal.db")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

HOST = os.getenv("HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", 8000))

# Document uploads
UPLOAD_DIR = Path(os.getenv("UPLOAD_DIR", BASE_DIR / "uploads"))
UPLOAD_BASE_URL = os.getenv("UPLOAD_BASE_URL", "/uploads").rstrip("/")  # path is served by the app, a full URL is not
MAX_UPLOAD_BYTES = int(os.getenv("MAX_UPLOAD_BYTES", 10 * 1024 * 1024))  # 10 MB default cap
ALLOWED_DOCUMENT_EXTENSIONS = {"pdf", "doc", "docx", "ppt", "pptx", "zip"}

STUDY_PROGRAMS = [
    "Teknik Informatika",
    "Sistem Informasi",
    "Teknik Komputer",
    "Multimedia dan Jaringan",
]

SORTABLE_PROJECT_FIELDS = [
    "project_name",
    "group_name",
    "course_name",
    "lecturer",
    "class_name",
    "program",
    "batch",
    "status",
]

SORTABLE_SUBMISSION_FIELDS = [
    "project_name",
    "course",
    "lecturer",
    "class_name",
    "group_class",
    "program_study",
    "status",
    "created_at",
]
