"""
Drive icon bindings in the Windows Registry.

HKLM\\SOFTWARE\\Microsoft\\Windows\\CurrentVersion\\Explorer\\DriveIcons\\<L>\\DefaultIcon
    (Default) = <path to .ico>

Writing under HKLM needs Administrator rights.
"""

from drive_icon_randomizer.errors import RegistryError

REG_BASE = r"SOFTWARE\Microsoft\Windows\CurrentVersion\Explorer\DriveIcons"
DEFAULT_VALUE = ""


class KeyValueStore:
    """Hierarchical key/value store. Missing keys or values raise FileNotFoundError."""

    def set_value(self, path, name, value):
        raise NotImplementedError

    def get_value(self, path, name):
        raise NotImplementedError

    def delete_value(self, path, name):
        raise NotImplementedError


class WindowsRegistry(KeyValueStore):

    def __init__(self, hive=None):
        import winreg
        self._winreg = winreg
        self.hive = winreg.HKEY_LOCAL_MACHINE if hive is None else hive

    def set_value(self, path, name, value):
        winreg = self._winreg
        with winreg.CreateKeyEx(self.hive, path, 0, winreg.KEY_SET_VALUE) as k:
            winreg.SetValueEx(k, name, 0, winreg.REG_SZ, value)

    def get_value(self, path, name):
        winreg = self._winreg
        with winreg.OpenKey(self.hive, path) as k:
            return winreg.QueryValueEx(k, name)[0]

    def delete_value(self, path, name):
        # Key is created if missing and left in place, only the value goes
        winreg = self._winreg
        with winreg.CreateKeyEx(self.hive, path, 0, winreg.KEY_SET_VALUE) as k:
            winreg.DeleteValue(k, name)


def normalize_letter(letter):
    letter = str(letter).strip().rstrip("\\").rstrip(":")
    if len(letter) != 1 or not ("A" <= letter.upper() <= "Z"):
        raise ValueError(f"Not a drive letter: {letter!r}")
    return letter.upper()


def icon_key(letter):
    return f"{REG_BASE}\\{normalize_letter(letter)}\\DefaultIcon"


class DriveIconRegistrar:

    def __init__(self, store):
        self.store = store

    def set(self, letter, ico_path):
        try:
            self.store.set_value(icon_key(letter), DEFAULT_VALUE, ico_path)
        except OSError as e:
            raise RegistryError(
                f"Registry write failed for drive {normalize_letter(letter)}: {e}"
            ) from e

    def get(self, letter):
        """Return the bound icon path, or None if the drive has none."""
        try:
            return self.store.get_value(icon_key(letter), DEFAULT_VALUE)
        except FileNotFoundError:
            return None
        except OSError as e:
            raise RegistryError(
                f"Registry read failed for drive {normalize_letter(letter)}: {e}"
            ) from e

    def clear(self, letter):
        try:
            self.store.delete_value(icon_key(letter), DEFAULT_VALUE)
        except FileNotFoundError as e:
            raise RegistryError(
                f"No icon set for drive {normalize_letter(letter)}"
            ) from e
        except OSError as e:
            raise RegistryError(
                f"Registry delete failed for drive {normalize_letter(letter)}: {e}"
            ) from e
