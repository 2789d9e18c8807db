#!/usr/bin/env python
import os
import sys

from django.conf import settings
from django.core.management import execute_from_command_line


def main():
    """Run the generate_typescript command as the 'rail-tsgen' program."""
    # Outside a Django project, install only this app
    if not os.environ.get("DJANGO_SETTINGS_MODULE") and not settings.configured:
        settings.configure(INSTALLED_APPS=["rail_tsgen"])

    execute_from_command_line([sys.argv[0], "generate_typescript", *sys.argv[1:]])


if __name__ == "__main__":
    main()
