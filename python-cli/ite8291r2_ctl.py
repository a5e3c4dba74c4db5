#!/usr/bin/env python3
# /// script
# dependencies = ["hidapi>=0.14"]
# ///
"""
ITE 8291r2 Keyboard Backlight Controller - Python CLI

Control the RGB backlight of laptops with the ITE 8291 rev 2 controller
(USB 048D:CE00) via HID feature reports.

Usage:
    sudo python3 ite8291r2_ctl.py -e <effect> [options]

Effects:
    mono      -c <color>           Single static color
    breath    -s <1-5>             Palette fading in and out
    wave      -s <1-5> -d <dir>    Palette sweeping left/right
    rainbow                        Fixed four-color rainbow
    flash     -s <1-5> -d <dir>    Palette flashing left/right
    mix       -s <1-5>             Palette colors mixing
    disable                        Backlight off

Common options:
    -b <1-5>   Brightness (default 3)
    -S         Save on the keyboard
"""

import sys
from ite8291r2.cli import main

if __name__ == "__main__":
    sys.exit(main())
