from ite8291r2.protocol import VENDOR_ID, PRODUCT_ID
from ite8291r2.device import DeviceError, KeyboardController, enumerate_devices
from ite8291r2.effects import EFFECTS


def cmd_scan():
    print("Scanning for ITE 8291r2...")
    print("=" * 60)
    devs = enumerate_devices()
    if not devs:
        print(f"  0x{VENDOR_ID:04X}:0x{PRODUCT_ID:04X}: not connected")
        return 1
    print(f"  0x{VENDOR_ID:04X}:0x{PRODUCT_ID:04X} - {len(devs)} interface(s):")
    for d in devs:
        path = d["path"]
        if isinstance(path, bytes):
            path = path.decode(errors="replace")
        print(f"    iface={d['interface_number']}  page=0x{d['usage_page']:04X}"
              f"  usage=0x{d['usage']:04X}  path={path}")
    return 0


def cmd_list():
    print("Available Effects (ITE 8291r2)")
    print("=" * 60)
    print(f"{'Name':<10} {'Requires':<22} {'Description'}")
    print("-" * 60)
    for name, cls in EFFECTS.items():
        req = ", ".join(f"--{r}" for r in cls.requires) or "-"
        desc = cls.description
        if cls.aliases:
            desc += f" (alias: {', '.join(cls.aliases)})"
        print(f"{name:<10} {req:<22} {desc}")
    print("=" * 60)
    print("\nUsage:")
    print("  -e mono -c red                 # Static red")
    print("  -e wave -d left -s 5 -b 4      # Fast wave to the left")
    print("  -e breath -s 2 -c '#00ffaa' -S # Slow breathing, saved")
    print("  -e disable                     # Backlight off")
    return 0


def cmd_apply(effect, controller=None):
    """Send an effect to the keyboard.

    Args:
        effect:     A constructed Effect.
        controller: Already-open KeyboardController; opened here if None.

    Returns:
        int: 0 on success, 1 on any device error.
    """
    print(f"Setting {effect.describe()}")
    packets = effect.packets()

    try:
        ctl = controller or KeyboardController.open()
    except DeviceError as e:
        print(f"  {e}")
        return 1

    try:
        sent = ctl.send_packets(packets)
    except DeviceError as e:
        print(f"  Write failed: {e}")
        return 1
    finally:
        ctl.close()

    print(f"  Packets: {sent}/{len(packets)} OK")
    print(f"  -> {effect.name} active{' (saved)' if effect.save else ''}!")
    return 0
