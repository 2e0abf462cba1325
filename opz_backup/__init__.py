"""
OPZ Backup - copies a removable device such as the OP-Z to a local snapshot.

Finds the device among mounted volumes, then copies its contents to a
timestamped directory under ``~/opz-backups`` with a progress bar.
"""

__version__ = "0.1.0"
__author__ = "OPZ Backup Contributors"
