# No dependencies
from enum import Enum


class ChannelDepth(str, Enum):
    BIT8 = "8bit"
    BIT16 = "16bit"

max_channel = {
    ChannelDepth.BIT8: 0xff,
    ChannelDepth.BIT16: 0xffff,
}

channel_shift = {
    ChannelDepth.BIT8: 8,
    ChannelDepth.BIT16: 0,
}

MAX_16 = max_channel[ChannelDepth.BIT16]
