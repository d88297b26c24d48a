class DriveIconError(Exception):
    """Base class for everything this tool reports per drive."""


class DecodeError(DriveIconError):
    """Source picture could not be read."""


class EncodeError(DriveIconError):
    """Picture could not be written out as an icon."""


class RegistryError(DriveIconError):
    """Drive icon binding could not be written or removed."""


class UsageError(DriveIconError):
    """Bad command line or missing image directory."""
