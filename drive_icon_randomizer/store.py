import glob
import os
import stat


class IconStore:
    """Folder of generated .ico files. Survives reboots, the registry points here."""

    def __init__(self, working_dir):
        self.working_dir = os.path.abspath(working_dir)

    def ensure_working_directory(self):
        os.makedirs(self.working_dir, exist_ok=True)

    def icon_path(self, name):
        return os.path.join(self.working_dir, f"{name}.ico")

    def save(self, data, name):
        path = self.icon_path(name)
        if os.path.exists(path):
            _clear_readonly(path)
        with open(path, "wb") as f:
            f.write(data)
        return path

    def list_icons(self):
        return sorted(glob.glob(os.path.join(self.working_dir, "*.ico")))

    def clear_all(self):
        """
        Delete every .ico in the working directory.
        Keeps going past files that cannot be removed and returns them
        as a list of (path, error).
        """
        failed = []
        for path in self.list_icons():
            try:
                _clear_readonly(path)
                os.remove(path)
            except OSError as e:
                failed.append((path, e))
        return failed


def _clear_readonly(path):
    mode = os.stat(path).st_mode
    if not mode & stat.S_IWRITE:
        os.chmod(path, mode | stat.S_IWRITE)
