#!/usr/bin/env python3
"""
Command wrapper for the Icinga IRC notifier

Point an Icinga NotificationCommand at this file (or the installed
``irc-notify`` script) and pass the alert macros as flags.
"""

from irc_notify.main import run

if __name__ == "__main__":
    run()
