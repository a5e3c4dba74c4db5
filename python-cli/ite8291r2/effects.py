"""
ITE 8291r2 - lighting effects.

Every effect is its own frozen dataclass carrying exactly the fields it needs.
``build_effect`` checks loose CLI options against those requirements.
"""

from dataclasses import dataclass, fields
from typing import ClassVar

from ite8291r2.protocol import (MODE_MONO, MODE_BREATH, MODE_WAVE, MODE_RAINBOW,
                                MODE_FLASH, MODE_MIX, MONO_SLOTS, FIXED_SPEED,
                                RAINBOW_PALETTE, color_packets, setup_packets,
                                effect_packet, disable_packet)
from ite8291r2.values import Brightness, Color, Direction, Speed

DEFAULT_BRIGHTNESS = Brightness(3)


class EffectArgumentError(ValueError):
    """An effect was requested without the options it needs."""


@dataclass(frozen=True, kw_only=True)
class Effect:
    name: ClassVar[str] = ""
    description: ClassVar[str] = ""
    requires: ClassVar[tuple] = ()
    aliases: ClassVar[tuple] = ()

    brightness: Brightness = DEFAULT_BRIGHTNESS
    save: bool = False

    def packets(self):
        """Return the feature reports for this effect, in send order."""
        raise NotImplementedError

    def describe(self):
        parts = [self.name]
        for f in fields(self):
            parts.append(f"{f.name}={getattr(self, f.name)}")
        return "  ".join(parts)


@dataclass(frozen=True, kw_only=True)
class Mono(Effect):
    name = "mono"
    description = "Single static color"
    requires = ("color",)
    aliases = ("monocolor",)

    color: Color

    def packets(self):
        pkts = color_packets([self.color] * MONO_SLOTS)
        pkts.append(effect_packet(MODE_MONO, FIXED_SPEED, self.brightness.value,
                                  save=self.save))
        return pkts


@dataclass(frozen=True, kw_only=True)
class Breath(Effect):
    name = "breath"
    description = "Palette colors fading in and out"
    requires = ("speed",)
    aliases = ("breathing",)

    speed: Speed

    def packets(self):
        return setup_packets() + [
            effect_packet(MODE_BREATH, self.speed.value, self.brightness.value,
                          save=self.save),
        ]


@dataclass(frozen=True, kw_only=True)
class Wave(Effect):
    name = "wave"
    description = "Palette sweeping across the keyboard"
    requires = ("direction", "speed")

    direction: Direction
    speed: Speed

    def packets(self):
        return setup_packets() + [
            effect_packet(MODE_WAVE, self.speed.value, self.brightness.value,
                          self.direction.value, self.save),
        ]


@dataclass(frozen=True, kw_only=True)
class Rainbow(Effect):
    name = "rainbow"
    description = "Fixed four-color rainbow"

    def packets(self):
        pkts = color_packets(RAINBOW_PALETTE)
        pkts.append(effect_packet(MODE_RAINBOW, FIXED_SPEED, self.brightness.value,
                                  save=self.save))
        return pkts


@dataclass(frozen=True, kw_only=True)
class Flash(Effect):
    name = "flash"
    description = "Palette flashing across the keyboard"
    requires = ("direction", "speed")

    direction: Direction
    speed: Speed

    def packets(self):
        return setup_packets() + [
            effect_packet(MODE_FLASH, self.speed.value, self.brightness.value,
                          self.direction.value, self.save),
        ]


@dataclass(frozen=True, kw_only=True)
class Mix(Effect):
    name = "mix"
    description = "Palette colors mixing"
    requires = ("speed",)

    speed: Speed

    def packets(self):
        return setup_packets() + [
            effect_packet(MODE_MIX, self.speed.value, self.brightness.value,
                          save=self.save),
        ]


@dataclass(frozen=True, kw_only=True)
class Disable(Effect):
    name = "disable"
    description = "Turn the backlight off"

    def packets(self):
        return [disable_packet()]

    def describe(self):
        return self.name


# ── Registry ─────────────────────────────────────────────────────────────
EFFECTS = {cls.name: cls for cls in (Mono, Breath, Wave, Rainbow, Flash, Mix, Disable)}

EFFECT_ALIASES = {alias: cls.name for cls in EFFECTS.values() for alias in cls.aliases}


def lookup_effect(name):
    """Resolve an effect name or alias (any case) to its class."""
    key = name.lower()
    key = EFFECT_ALIASES.get(key, key)
    if key not in EFFECTS:
        raise EffectArgumentError(f"unknown effect '{name}'")
    return EFFECTS[key]


def build_effect(name, brightness=None, save=False, color=None, speed=None,
                 direction=None):
    """Check options against the effect's requirements and build it.

    Options the effect does not use are ignored.

    Raises:
        EffectArgumentError: unknown effect, or a required option is None.
    """
    cls = lookup_effect(name)
    given = {"color": color, "speed": speed, "direction": direction}
    missing = [opt for opt in cls.requires if given[opt] is None]
    if missing:
        flags = " and ".join(f"--{opt}" for opt in missing)
        raise EffectArgumentError(f"effect '{cls.name}' requires {flags}")

    kwargs = {opt: given[opt] for opt in cls.requires}
    if brightness is not None:
        kwargs["brightness"] = brightness
    return cls(save=bool(save), **kwargs)
