"""Package metadata and naming constants."""

from importlib.metadata import PackageNotFoundError, version

PACKAGE_NAME = "pattern-catalogue"
PACKAGE_NAME_PYTHON = PACKAGE_NAME.replace("-", "_")
DESCRIPTION = "Catalogue of creational, structural and behavioral design pattern demonstrations"

try:
    __version__ = version(PACKAGE_NAME)
except PackageNotFoundError:
    # Running from a source checkout without an installed distribution
    __version__ = "1.0.0"

VERSION = __version__
