# Copyright (c) Kuba Szczodrzyński 2026-10-17.

SIZE_UNITS = ["KiB", "MiB", "GiB"]


def sizeof(size: int) -> str:
    if size < 1024:
        return f"{size} B"
    value = float(size)
    for unit in SIZE_UNITS:
        value /= 1024
        if value < 1024:
            break
    return f"{value:.1f} {unit}"
