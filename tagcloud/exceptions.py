class TagCloudError(Exception):
    """Base class for every error raised by the tag cloud packer."""


class InvalidSizeError(TagCloudError, ValueError):
    """A rectangle with a non-positive width or height was requested."""


class PlacementExhaustedError(TagCloudError):
    """No collision-free position was found within the placement budget."""


class CloudBoundsError(TagCloudError):
    """The placed rectangles do not fit inside the target canvas."""


class ColorParseError(TagCloudError, ValueError):
    """A color string could not be understood."""
