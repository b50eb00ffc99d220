# Copyright (c) Kuba Szczodrzyński 2026-10-17.

from typing import Optional

from importlib_metadata import PackageNotFoundError, version


def get_version() -> Optional[str]:
    try:
        return version("ipstool")
    except PackageNotFoundError:
        # running from a source checkout
        return None
