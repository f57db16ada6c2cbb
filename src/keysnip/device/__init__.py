# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later

# Keyboard output stages
# snippet level:
# stage 1: key combos are expanded into press/release events (keysnip.chords)
# stage 2: text and argument values are typed one character at a time (keysnip.playback)

# device level:
# stage 3: OS-specific; inject the events through pynput, or record them for a dry run
