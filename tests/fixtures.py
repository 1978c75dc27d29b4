"""Descriptors of a 2-of-3 P2WSH testnet wallet, as exported by Sparrow."""

INTERNAL_BRAID = (
    "wsh(sortedmulti(2,[96cf6667/45h/1h/12h/2]tpubDEX9s9A6av9oHR89T9VArgrt4zg3zBGndMm6Q2LEaBiEF153K2yF2yewHWmfNicEUdBXzmaP7VBZvT5D3GG1m5cYy36qfsA9RQS1uYw3MGi/1/*,[611d202e/45h/1h/11h/2]tpubDEcXYgwH59Qbqs3qwFNkWLoWJ8zhJdY5bna4n5iUwWPouMuUXndbiFcf5X29Eq3SDBKc66mgACxDYMpjLPhucGLB33qdgCndKBGDmnZV9mU/1/*,[e0bbee43/0/0/0/0]tpubDEeGXbhQg9q8ZvPYs7GYiBXACgy4YYaew2CWSrs1u5auQwzuDhebd4m4ikBZ3KQKNvAtMhe5G6Nxek5QZw4gMqpywCuPvBHMrHPHBGgbDu7/1/*))"
)
INTERNAL_BRAID_CHECKSUM = "53c6vhej"

EXTERNAL_BRAID = (
    "wsh(sortedmulti(2,[96cf6667/45h/1h/12h/2]tpubDEX9s9A6av9oHR89T9VArgrt4zg3zBGndMm6Q2LEaBiEF153K2yF2yewHWmfNicEUdBXzmaP7VBZvT5D3GG1m5cYy36qfsA9RQS1uYw3MGi/0/*,[611d202e/45h/1h/11h/2]tpubDEcXYgwH59Qbqs3qwFNkWLoWJ8zhJdY5bna4n5iUwWPouMuUXndbiFcf5X29Eq3SDBKc66mgACxDYMpjLPhucGLB33qdgCndKBGDmnZV9mU/0/*,[e0bbee43/0/0/0/0]tpubDEeGXbhQg9q8ZvPYs7GYiBXACgy4YYaew2CWSrs1u5auQwzuDhebd4m4ikBZ3KQKNvAtMhe5G6Nxek5QZw4gMqpywCuPvBHMrHPHBGgbDu7/0/*))"
)
EXTERNAL_BRAID_CHECKSUM = "jakhj6fe"

MULTIPATH = (
    "wsh(sortedmulti(2,[96cf6667/45h/1h/12h/2]tpubDEX9s9A6av9oHR89T9VArgrt4zg3zBGndMm6Q2LEaBiEF153K2yF2yewHWmfNicEUdBXzmaP7VBZvT5D3GG1m5cYy36qfsA9RQS1uYw3MGi/<0;1>/*,[611d202e/45h/1h/11h/2]tpubDEcXYgwH59Qbqs3qwFNkWLoWJ8zhJdY5bna4n5iUwWPouMuUXndbiFcf5X29Eq3SDBKc66mgACxDYMpjLPhucGLB33qdgCndKBGDmnZV9mU/<0;1>/*,[e0bbee43/0/0/0/0]tpubDEeGXbhQg9q8ZvPYs7GYiBXACgy4YYaew2CWSrs1u5auQwzuDhebd4m4ikBZ3KQKNvAtMhe5G6Nxek5QZw4gMqpywCuPvBHMrHPHBGgbDu7/<0;1>/*))"
)
MULTIPATH_CHECKSUM = "9elkxhm0"

# (xfp, bip32 path, xpub) of each signer, in order of apparition.
KEYS = [
    (
        "96cf6667",
        "m/45'/1'/12'/2",
        "tpubDEX9s9A6av9oHR89T9VArgrt4zg3zBGndMm6Q2LEaBiEF153K2yF2yewHWmfNicEUdBXzmaP7VBZvT5D3GG1m5cYy36qfsA9RQS1uYw3MGi",
    ),
    (
        "611d202e",
        "m/45'/1'/11'/2",
        "tpubDEcXYgwH59Qbqs3qwFNkWLoWJ8zhJdY5bna4n5iUwWPouMuUXndbiFcf5X29Eq3SDBKc66mgACxDYMpjLPhucGLB33qdgCndKBGDmnZV9mU",
    ),
    (
        "e0bbee43",
        "m/0/0/0/0",
        "tpubDEeGXbhQg9q8ZvPYs7GYiBXACgy4YYaew2CWSrs1u5auQwzuDhebd4m4ikBZ3KQKNvAtMhe5G6Nxek5QZw4gMqpywCuPvBHMrHPHBGgbDu7",
    ),
]

# A 2-of-2 P2SH mainnet wallet, with checksums.
MAINNET_EXTERNAL = "sh(sortedmulti(2,[f57ec65d/45'/0'/100']xpub6CCHViYn5VzPfSR7baop9FtGcbm3UnqHwa54Z2eNvJnRFCJCdo9HtCYoLJKZCoATMLUowDDA1BMGfQGauY3fDYU3HyMzX4NDkoLYCSkLpbH/0/*,[efa5d916/45'/0'/100']xpub6Ca5CwTgRASgkXbXE5TeddTP9mPCbYHreCpmGt9dhz9y6femstHGCoFESHHKKRcm414xMKnuLjP9LDS7TwaJC9n5gxua6XB1rwPcC6hqDub/0/*))#uxj9xxul"
MAINNET_INTERNAL = "sh(sortedmulti(2,[f57ec65d/45'/0'/100']xpub6CCHViYn5VzPfSR7baop9FtGcbm3UnqHwa54Z2eNvJnRFCJCdo9HtCYoLJKZCoATMLUowDDA1BMGfQGauY3fDYU3HyMzX4NDkoLYCSkLpbH/1/*,[efa5d916/45'/0'/100']xpub6Ca5CwTgRASgkXbXE5TeddTP9mPCbYHreCpmGt9dhz9y6femstHGCoFESHHKKRcm414xMKnuLjP9LDS7TwaJC9n5gxua6XB1rwPcC6hqDub/1/*))#3hxf9z66"
