"""Storage, authorization and workflow layer for the hockey association app."""

from hockeyapp.app_factory import HockeyApp, create_app

__all__ = ["HockeyApp", "create_app"]
