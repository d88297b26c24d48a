import ctypes
import sys

# ── Drive types (GetDriveTypeW) ───────────────────────────────────────────────
DRIVE_FIXED = 3

# ── Shell notification ────────────────────────────────────────────────────────
SHCNE_ASSOCCHANGED = 0x08000000
SHCNF_FLUSHNOWAIT = 0x3000


def _kernel32():
    return ctypes.windll.kernel32


def list_fixed_drives(kernel32=None):
    """Root names ("C:\\") of all fixed (non-removable) local drives."""
    k32 = kernel32 or _kernel32()
    drives = []
    bitmask = k32.GetLogicalDrives()
    for letter in "ABCDEFGHIJKLMNOPQRSTUVWXYZ":
        if bitmask & 1:
            d = f"{letter}:\\"
            if k32.GetDriveTypeW(d) == DRIVE_FIXED:
                drives.append(d)
        bitmask >>= 1
    return drives


def drive_letter(drive):
    return drive[:1].upper()


def is_windows():
    return sys.platform == "win32"


def is_admin():
    if not is_windows():
        return False
    try:
        return bool(ctypes.windll.shell32.IsUserAnAdmin())
    except OSError:
        return False


def notify_shell():
    """Tell Explorer that icon associations changed."""
    if not is_windows():
        return
    ctypes.windll.shell32.SHChangeNotify(
        SHCNE_ASSOCCHANGED, SHCNF_FLUSHNOWAIT, None, None)
