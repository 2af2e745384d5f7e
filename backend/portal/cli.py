import click
from portal.extensions import db
from portal.store import eq, get_store
from portal.domain.exceptions import RecordNotFound

DEFAULT_SECTIONS = (
    {"title": "Test Series", "description": "Practice tests and schedules", "icon": "ClipboardList"},
    {"title": "Study Material", "description": "Notes and resources by class and subject", "icon": "BookOpen"},
    {"title": "Location & Centre", "description": "Find our centres", "icon": "MapPin"},
)


def register_commands(app):
    @app.cli.command("init-db")
    def init_db():
        """Create all tables."""
        db.create_all()
        click.echo("Tables created")

    @app.cli.command("seed-sections")
    def seed_sections():
        """Insert the default sections that are not present yet."""
        store = get_store()
        existing = {s["title"] for s in store.query_records("sections")}
        start = store.count_records("sections")

        for offset, section in enumerate(
            (s for s in DEFAULT_SECTIONS if s["title"] not in existing), start=1
        ):
            record = store.insert_record(
                "sections", {**section, "display_order": start + offset}
            )
            click.echo(f"Created section {record['title']} ({record['kind']})")

    @app.cli.command("create-admin")
    @click.argument("email")
    @click.password_option()
    def create_admin(email, password):
        """Create a user with the admin role, or grant the role to an existing user."""
        store = get_store()

        try:
            user = store.query_one("users", [eq("email", email)])
        except RecordNotFound:
            user = store.insert_record("users", {"email": email, "password": password})

        try:
            store.query_one("user_roles", [eq("user_id", user["id"]), eq("role", "admin")])
            click.echo(f"{email} is already an admin")
        except RecordNotFound:
            store.insert_record("user_roles", {"user_id": user["id"], "role": "admin"})
            click.echo(f"{email} is now an admin")
