"""Flask CLI commands for PocketDiary."""

from __future__ import annotations

import click


def init_app(app) -> None:
    """Register CLI commands on the Flask app."""

    @app.cli.command("pocketdiary-create-user")
    @click.option("--email", prompt=True, help="Sign-in email address")
    @click.option("--name", default="", help="Display name")
    @click.password_option(help="Account password")
    def create_user(email: str, name: str, password: str) -> None:
        """Create a diary account."""

        from .errors import DiaryError
        from .extensions import get_session_factory
        from .services import auth

        try:
            user = auth.create_user(
                email=email, password=password, name=name, session_factory=get_session_factory()
            )
        except DiaryError as exc:
            raise click.ClickException(exc.message) from exc
        click.echo(f"Created user #{user.id} ({user.email})")

    @app.cli.command("pocketdiary-rebuild-streaks")
    @click.option("--email", default=None, help="Only rebuild this user's streak")
    def rebuild_streaks(email: str | None) -> None:
        """Recompute stored streaks from entry history."""

        from .extensions import get_diary_service, get_session_factory
        from .services import auth

        session_factory = get_session_factory()
        if email:
            user = auth.get_user_by_email(email, session_factory)
            if user is None:
                raise click.ClickException(f"No user with email {email}")
            users = [user]
        else:
            users = auth.list_users(session_factory)

        service = get_diary_service()
        for user in users:
            state = service.rebuild_streak(user.id)
            click.echo(
                f"{user.email}: current={state.current_streak} "
                f"longest={state.longest_streak} last={state.last_entry_date or '-'}"
            )

    @app.cli.command("pocketdiary-reset-password")
    @click.option("--email", prompt=True, help="Account email")
    @click.password_option(help="New password")
    def reset_password(email: str, password: str) -> None:
        """Set a new password for an existing account."""

        from .errors import DiaryError
        from .extensions import get_session_factory
        from .services import auth

        session_factory = get_session_factory()
        user = auth.get_user_by_email(email, session_factory)
        if user is None:
            raise click.ClickException(f"No user with email {email}")
        try:
            auth.reset_password(user_id=user.id, password=password, session_factory=session_factory)
        except DiaryError as exc:
            raise click.ClickException(exc.message) from exc
        click.echo(f"Password updated for {user.email}")
