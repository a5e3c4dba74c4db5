"""
ITE 8291r2 HID Protocol - constants, value tables, and packet builders.
"""

# ── USB Identifiers ──────────────────────────────────────────────────────
VENDOR_ID  = 0x048D
PRODUCT_ID = 0xCE00

REPORT_LEN = 8

# ── Command bytes ────────────────────────────────────────────────────────
CMD_COLOR  = 0x14
CMD_EFFECT = 0x08

SUBCMD_DISABLE = 0x01
SUBCMD_ENABLE  = 0x02

MODE_MONO    = 0x01
MODE_BREATH  = 0x02
MODE_WAVE    = 0x03
MODE_RAINBOW = 0x05
MODE_FLASH   = 0x12
MODE_MIX     = 0x13

# Speed byte sent by effects that have no speed setting
FIXED_SPEED = 0x05
EFFECT_TAIL = 0x08
NO_DIRECTION = 0x00

# ── Value tables ─────────────────────────────────────────────────────────
BRIGHTNESS_VALUES = (0x00, 0x08, 0x16, 0x24, 0x32)
SPEED_VALUES      = (0x0A, 0x07, 0x05, 0x03, 0x01)  # slowest → fastest

DIRECTION_LEFT  = 0x01
DIRECTION_RIGHT = 0x02

MONO_SLOTS = 4

# ── Palettes ─────────────────────────────────────────────────────────────
GENERIC_PALETTE = (
    (0xFF, 0x00, 0x00),
    (0xFF, 0x5A, 0x00),
    (0xFF, 0xB4, 0x00),
    (0x00, 0xB4, 0x00),
    (0x00, 0x00, 0xFF),
    (0x00, 0xB4, 0xFF),
    (0xFF, 0x00, 0xFF),
)

RAINBOW_PALETTE = (
    (0xFF, 0x00, 0x00),
    (0x00, 0xB4, 0x00),
    (0x00, 0x00, 0xFF),
    (0xFF, 0x00, 0xFF),
)


# ── Packet builders ──────────────────────────────────────────────────────
def _color_packet(slot, rgb):
    """Build one palette slot packet: 14 00 <slot> RR GG BB 00 00."""
    r, g, b = rgb
    return bytes([CMD_COLOR, 0x00, slot, r, g, b, 0x00, 0x00])


def color_packets(colors):
    """Build palette packets for slots 1..len(colors), in order."""
    return [_color_packet(i + 1, rgb) for i, rgb in enumerate(colors)]


def setup_packets():
    """The 7-slot palette sent ahead of the animated effects."""
    return color_packets(GENERIC_PALETTE)


def effect_packet(mode, speed, brightness, direction=NO_DIRECTION, save=False):
    """Build the terminating effect packet.

    Args:
        mode:       Effect mode byte (e.g. MODE_WAVE).
        speed:      Speed byte (already resolved from the user level).
        brightness: Brightness byte.
        direction:  Direction byte, 0x00 for effects without one.
        save:       Ask the controller to persist the setting.

    Returns:
        bytes: 8-byte feature report.
    """
    return bytes([CMD_EFFECT, SUBCMD_ENABLE, mode, speed, brightness,
                  EFFECT_TAIL, direction, 0x01 if save else 0x00])


def disable_packet():
    return bytes([CMD_EFFECT, SUBCMD_DISABLE, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00])
