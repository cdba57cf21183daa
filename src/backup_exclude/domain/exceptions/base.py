"""Base exceptions for backup_exclude."""


class BackupExcludeError(Exception):
    """Root exception for all backup_exclude errors.

    All library exceptions inherit from this.
    Allows catching every backup_exclude-specific error at once.
    """
