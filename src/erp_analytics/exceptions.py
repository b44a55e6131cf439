"""Exception types raised by erp_analytics."""


class ERPAnalyticsError(Exception):
    """Base class for all erp_analytics errors."""


class InvalidParameterError(ERPAnalyticsError, ValueError):
    """Raised when a caller passes an argument outside its allowed set."""


class DataStoreError(ERPAnalyticsError):
    """Raised when records cannot be loaded from a data store."""


class InvalidBackupError(ERPAnalyticsError, ValueError):
    """Raised when a backup document is malformed or incomplete."""
