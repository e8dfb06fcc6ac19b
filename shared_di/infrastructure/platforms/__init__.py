"""
Native modules for each supported front-end platform.
"""

from typing import Dict

from ...application.module import Module
from . import android, desktop, ios

NATIVE_MODULES: Dict[str, Module] = {
    "android": android.native_module,
    "ios": ios.native_module,
    "desktop": desktop.native_module,
}


def get_native_module(platform: str) -> Module:
    """
    Get the native module for a platform.

    Args:
        platform: Platform key, one of ``android``, ``ios`` or ``desktop``

    Returns:
        The platform's native module

    Raises:
        ValueError: If the platform is not supported
    """
    try:
        return NATIVE_MODULES[platform.lower()]
    except KeyError:
        raise ValueError(
            f"Unsupported platform: {platform} "
            f"(expected one of {', '.join(NATIVE_MODULES)})") from None


__all__ = [
    "NATIVE_MODULES",
    "get_native_module",
]
