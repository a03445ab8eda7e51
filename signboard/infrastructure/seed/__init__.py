"""Seed data installed on an empty store."""

from signboard.infrastructure.seed.demo_announcements import demo_announcements

__all__ = ["demo_announcements"]
