"""
Seed the exhibition catalogue and provision admin accounts.

Admins cannot sign themselves up through the API; create them here:

    python -m expo_portal.db.seed --admin-email admin@polnes.ac.id --admin-password ...

Run without arguments to (re)seed the demo project catalogue only.
"""
import argparse
import logging
import sys

from sqlalchemy.orm import Session

from expo_portal.core.choices import Role
from expo_portal.core.security import hash_password
from expo_portal.db.init_db import init_db
from expo_portal.db.session import SessionLocal
from expo_portal.models.project import Project
from expo_portal.models.user import User

logger = logging.getLogger(__name__)

DEMO_PROJECTS = [
    {
        "project_name": "Smart Campus Management System",
        "group_name": "Tech Innovators",
        "members": ["Ahmad Fauzi", "Sari Indah", "Budi Santoso"],
        "course_name": "Rekayasa Perangkat Lunak",
        "lecturer": "Dr. Ir. Bambang Suharto, M.T.",
        "class_name": "TI-3A",
        "program": "Teknik Informatika",
        "batch": "2022",
        "status": "approved",
    },
    {
        "project_name": "IoT-Based Environmental Monitoring",
        "group_name": "Green Tech",
        "members": ["Maya Putri", "Eko Prasetyo", "Rina Sari", "Dani Kurniawan"],
        "course_name": "Internet of Things",
        "lecturer": "Prof. Dr. Siti Nurhaliza, M.Kom.",
        "class_name": "TI-3B",
        "program": "Teknik Informatika",
        "batch": "2022",
        "status": "approved",
    },
    {
        "project_name": "E-Commerce Mobile App with AI Recommendation",
        "group_name": "Mobile Masters",
        "members": ["Rizki Ananda", "Putri Maharani"],
        "course_name": "Pemrograman Mobile",
        "lecturer": "Ir. Andi Wijaya, M.T.",
        "class_name": "SI-3A",
        "program": "Sistem Informasi",
        "batch": "2022",
        "status": "pending",
    },
    {
        "project_name": "Blockchain-Based Certificate Verification",
        "group_name": "Crypto Coders",
        "members": ["Fajar Ramadhan", "Lisa Permata", "Andi Saputra"],
        "course_name": "Keamanan Siber",
        "lecturer": "Dr. Muhammad Yusuf, M.Kom.",
        "class_name": "TK-3A",
        "program": "Teknik Komputer",
        "batch": "2022",
        "status": "approved",
    },
    {
        "project_name": "AR-Based Learning Platform for Chemistry",
        "group_name": "AR Innovators",
        "members": ["Dewi Kartika", "Arif Hidayat", "Nisa Rahma"],
        "course_name": "Multimedia Interaktif",
        "lecturer": "Ir. Ratna Sari, M.T.",
        "class_name": "MI-3B",
        "program": "Multimedia dan Jaringan",
        "batch": "2022",
        "status": "approved",
    },
]


def seed_projects(db: Session) -> int:
    """Insert demo projects that are not in the catalogue yet; returns how many were added."""
    existing = {name for (name,) in db.query(Project.project_name).all()}
    added = 0
    for data in DEMO_PROJECTS:
        if data["project_name"] in existing:
            continue
        db.add(Project(**data))
        added += 1
    db.commit()
    return added


def create_admin(
    db: Session,
    email: str,
    password: str,
    username: str = "admin",
    full_name: str = "Administrator",
) -> User:
    user = db.query(User).filter(User.email == email).first()
    if user:
        # promote an existing account rather than creating a second one
        user.role = Role.ADMIN.value
    else:
        user = User(
            email=email,
            username=username,
            full_name=full_name,
            hashed_password=hash_password(password),
            role=Role.ADMIN.value,
        )
        db.add(user)
    db.commit()
    db.refresh(user)
    return user


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Seed the Expo Portal database.")
    parser.add_argument("--admin-email")
    parser.add_argument("--admin-password")
    parser.add_argument("--admin-username", default="admin")
    parser.add_argument("--admin-name", default="Administrator")
    parser.add_argument("--skip-projects", action="store_true")
    args = parser.parse_args(argv)

    if args.admin_email and not args.admin_password:
        parser.error("--admin-password is required with --admin-email")

    logging.basicConfig(level=logging.INFO)
    init_db()

    db = SessionLocal()
    try:
        if not args.skip_projects:
            added = seed_projects(db)
            logger.info("Seeded %d demo project(s)", added)
        if args.admin_email:
            admin = create_admin(
                db,
                email=args.admin_email,
                password=args.admin_password,
                username=args.admin_username,
                full_name=args.admin_name,
            )
            logger.info("Admin account ready: %s (id=%s)", admin.email, admin.id)
    finally:
        db.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
