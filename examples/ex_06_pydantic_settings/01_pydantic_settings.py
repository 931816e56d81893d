"""Pydantic settings autowiring.

``BaseSettings`` subclasses are built with no arguments so that they read
their values from the environment. Like every resolved value, the settings
object is shared by everything that depends on it.
"""

from __future__ import annotations

import os

from pydantic_settings import BaseSettings

from refwire import Autowirer, AutowiringContainer


class AppSettings(BaseSettings):
    app_value: str = "settings"


class Service:
    def __init__(self, settings: AppSettings) -> None:
        self.settings = settings


def main() -> None:
    os.environ["APP_VALUE"] = "from-env"
    container = AutowiringContainer(Autowirer())

    service = container.get(Service)

    print(f"settings_value={service.settings.app_value}")  # => settings_value=from-env
    print(f"settings_shared={service.settings is container.get(AppSettings)}")  # => settings_shared=True


if __name__ == "__main__":
    main()
