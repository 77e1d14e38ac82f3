# SPDX-FileCopyrightText: 2025 Joonas Rautiola <mail@joinemm.dev>
# SPDX-License-Identifier: MPL-2.0

from emojiformat.cli import main

main()
