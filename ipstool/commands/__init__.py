# Copyright (c) Kuba Szczodrzyński 2026-10-17.
