# Copyright (c) Kuba Szczodrzyński 2026-10-17.


def betoint(data: bytes) -> int:
    return int.from_bytes(data, byteorder="big")


def inttobe16(data: int) -> bytes:
    return data.to_bytes(length=2, byteorder="big")


def inttobe24(data: int) -> bytes:
    return data.to_bytes(length=3, byteorder="big")
