# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later

# Key event stages
# capture level:
# stage 0: platform-specific; the input surface reports KeyPressed and TextChanged notifications
# stage 1: classify keys; drop navigation/modifier keys, split off deletion keys, normalize the rest

# editor level:
# stage 2: queue pending key events until a text change arrives
# stage 3: reconcile the text change against the queue and the committed log
