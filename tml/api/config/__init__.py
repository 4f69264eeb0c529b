"""Config API domain."""

from .get_package_version import get_package_version
from .TmlConfig import TmlConfig

__all__ = ["TmlConfig", "get_package_version"]
